"""
Navigation engine

Moves a cursor across slide boundaries and edits them. Every operation is
pure: it takes a text snapshot and cursor and returns an EditResult for the
host to apply.

Operations:
- slide_next / slide_prev: jump to the neighbouring "---" line
- separator_insert: open a new slide, incremental step or note after the
  current slide (wrapped by slide_new, slideIncremental_new, note_new)
- slide_kill: delete the slide around the cursor

Decks without any separator are valid; moves clamp to document start or end.
"""

from ..models.edits import EditResult
from ..models.separators import SeparatorKind
from .document import (
    lineEnd_find,
    lineForward_move,
    offset_clamp,
    separatorBackward_search,
    separatorForward_search,
)
from .log import LOG


SLIDE_TOKEN = SeparatorKind.SLIDE.token


def slide_next(text: str, cursor: int) -> EditResult:
    """
    Move to the start of the next "---" line, or to document end

    The search starts at the end of the cursor line, so a cursor sitting
    on a separator moves past it.
    """
    origin = lineEnd_find(text, cursor)
    found = separatorForward_search(text, origin, SLIDE_TOKEN)
    target = len(text) if found is None else found
    LOG(f"slide_next: {cursor} -> {target}", level=3)
    return EditResult(text=text, cursor=target)


def slide_prev(text: str, cursor: int) -> EditResult:
    """Move to the start of the previous "---" line, or to document start"""
    found = separatorBackward_search(text, cursor, SLIDE_TOKEN)
    target = 0 if found is None else found
    LOG(f"slide_prev: {cursor} -> {target}", level=3)
    return EditResult(text=text, cursor=target)


def separator_insert(text: str, cursor: int, kind: SeparatorKind) -> EditResult:
    """
    Insert a separator after the current slide

    At document end the separator is appended on its own line and the
    cursor is left after it. Elsewhere the separator and an empty body
    line are inserted in front of the next slide and the cursor is left
    on that empty line.

    Args:
        text: Document text
        cursor: Cursor offset
        kind: Separator to insert

    Returns:
        Edited text and the cursor inside the new empty body

    Example:
        >>> separator_insert("A\\n---\\nB", 0, SeparatorKind.NOTE)
        EditResult(text='A\\n???\\n\\n---\\nB', cursor=6)
    """
    position = slide_next(text, cursor).cursor
    token = kind.token

    if position == len(text):
        inserted = "\n" + token + "\n"
        edited = text + inserted
        result = EditResult(text=edited, cursor=len(edited))
    else:
        inserted = token + "\n\n"
        edited = text[:position] + inserted + text[position:]
        # One line up from the following content: the blank body line
        result = EditResult(text=edited, cursor=position + len(token) + 1)

    LOG(f"Inserted {kind.name} separator at {position}", level=2)
    return result


def slide_new(text: str, cursor: int) -> EditResult:
    return separator_insert(text, cursor, SeparatorKind.SLIDE)


def slideIncremental_new(text: str, cursor: int) -> EditResult:
    return separator_insert(text, cursor, SeparatorKind.INCREMENTAL)


def note_new(text: str, cursor: int) -> EditResult:
    return separator_insert(text, cursor, SeparatorKind.NOTE)


def slide_kill(text: str, cursor: int) -> EditResult:
    """
    Delete the slide containing the cursor

    The deleted range starts at the previous "---" line (or document start)
    and runs up to the next "---" line after it (or document end). The
    cursor ends at the start of whatever follows the removed range.

    Example:
        >>> slide_kill("---\\nS1\\n---\\nS2\\n---\\nS3", 12)
        EditResult(text='---\\nS1\\n---\\nS3', cursor=7)
    """
    cursor = offset_clamp(text, cursor)
    start = slide_prev(text, cursor).cursor
    following = separatorForward_search(text, lineForward_move(text, start), SLIDE_TOKEN)
    end = len(text) if following is None else following

    LOG(f"Killing slide text [{start}, {end})", level=2)
    return EditResult(text=text[:start] + text[end:], cursor=start)
