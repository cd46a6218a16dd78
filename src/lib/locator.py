"""
Slide locator

Maps a cursor position to the 1-based index of the slide it sits in.

Counting rule (applied to the lines before the cursor):
- Lines starting with "---" add one slide
- Lines starting with "layout: true" subtract one
- Everything else, including "--" and "???" lines, is ignored

The subtraction cancels the slide that a leading layout pragma would
otherwise introduce: remark renders "layout: true" followed by "---" as a
template, not as a visible slide. The rule is applied literally, including
for decks with several pragmas or pragmas further down.

Example:
    >>> slide_locate(["Intro", "---", "B", "---", "C"])
    3
    >>> slide_locate(["layout: true", "---", "Slide1", "---", "Sli"])
    2
"""

from functools import reduce
from typing import Iterable

from ..models.separators import SeparatorKind, layoutPragma_is
from .document import lines_get, prefix_get
from .log import LOG


def slideCount_step(accumulator: int, line: str) -> int:
    """Apply one counted line to the running slide number"""
    if layoutPragma_is(line):
        return accumulator - 1
    return accumulator + 1


def slideCounted_is(line: str) -> bool:
    """True for lines that take part in slide counting"""
    return layoutPragma_is(line) or line.startswith(SeparatorKind.SLIDE.token)


def slide_locate(prefixLines: Iterable[str]) -> int:
    """
    Compute the slide index for the lines preceding the cursor

    Args:
        prefixLines: Lines from document start up to the cursor; the last
                     element is the (possibly partial) cursor line

    Returns:
        Slide index, always >= 1
    """
    counted = [line for line in prefixLines if slideCounted_is(line)]
    index = max(1, reduce(slideCount_step, counted, 1))
    LOG(f"Located slide {index} from {len(counted)} counted lines", level=3)
    return index


def slide_locateAt(text: str, offset: int) -> int:
    """Slide index of a cursor offset in text"""
    return slide_locate(lines_get(prefix_get(text, offset)))
