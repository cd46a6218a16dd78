"""
Read-only document model

Line and separator lookups over a snapshot of deck text. Offsets are
0-based character positions; every function clamps out-of-range offsets
instead of raising.

Line-start matching follows the rules of an anchored "^token" search:
- Forward searches consider lines whose start is at or after the origin
- Backward searches consider lines whose token match ends at or before
  the origin

Example:
    >>> text = "Intro\\n---\\nBody"
    >>> prefix_get(text, 8)
    'Intro\\n--'
    >>> separatorForward_search(text, 0, "---")
    6
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models.separators import SeparatorKind


def offset_clamp(text: str, offset: int) -> int:
    """Clamp an offset into [0, len(text)]"""
    return max(0, min(offset, len(text)))


def prefix_get(text: str, offset: int) -> str:
    """Return the text from document start up to (not including) offset"""
    return text[:offset_clamp(text, offset)]


def lines_get(text: str) -> List[str]:
    """
    Split text into its ordered lines

    The empty document has one empty line, and a trailing newline yields
    a trailing empty line, so len(lines_get(text)) == text.count("\\n") + 1.
    """
    return text.split("\n")


def lineStart_find(text: str, offset: int) -> int:
    """Offset of the first character of the line containing offset"""
    offset = offset_clamp(text, offset)
    return text.rfind("\n", 0, offset) + 1


def lineEnd_find(text: str, offset: int) -> int:
    """Offset of the newline ending the line containing offset (or len)"""
    offset = offset_clamp(text, offset)
    end = text.find("\n", offset)
    return len(text) if end == -1 else end


def lineForward_move(text: str, offset: int) -> int:
    """Start of the next line, or document end on the last line"""
    end = lineEnd_find(text, offset)
    return end + 1 if end < len(text) else len(text)


def lineBackward_move(text: str, offset: int) -> int:
    """Start of the previous line, or document start on the first line"""
    start = lineStart_find(text, offset)
    if start == 0:
        return 0
    return lineStart_find(text, start - 1)


def separatorForward_search(text: str, offset: int, token: str) -> Optional[int]:
    """
    Find the first line at or after offset that starts with token

    Args:
        text: Document text
        offset: Search origin; a line starting exactly here is a candidate
        token: Line-start token (e.g. "---")

    Returns:
        Offset of the matching line start, or None
    """
    offset = offset_clamp(text, offset)
    if lineStart_find(text, offset) == offset:
        start = offset
    else:
        newline = text.find("\n", offset)
        if newline == -1:
            return None
        start = newline + 1
    while True:
        if text.startswith(token, start):
            return start
        newline = text.find("\n", start)
        if newline == -1:
            return None
        start = newline + 1


def separatorBackward_search(text: str, offset: int, token: str) -> Optional[int]:
    """
    Find the last line starting with token whose match ends at or before offset

    Args:
        text: Document text
        offset: Search origin
        token: Line-start token (e.g. "---")

    Returns:
        Offset of the matching line start, or None
    """
    offset = offset_clamp(text, offset)
    start = lineStart_find(text, offset)
    while True:
        if start + len(token) <= offset and text.startswith(token, start):
            return start
        if start == 0:
            return None
        start = lineStart_find(text, start - 1)


@dataclass(frozen=True)
class Document:
    """
    Immutable snapshot of a deck

    Thin object wrapper over the module functions for callers that hold
    on to a snapshot (the live session, the CLI pipeline).

    Attributes:
        text: Full document text
    """
    text: str

    def prefix_get(self, offset: int) -> str:
        return prefix_get(self.text, offset)

    def lines_get(self) -> List[str]:
        return lines_get(self.text)

    def separators_list(self) -> List[Tuple[int, SeparatorKind]]:
        """
        All separator lines in document order

        Returns:
            List of (line start offset, kind) pairs
        """
        separators = []
        offset = 0
        for line in self.lines_get():
            kind = SeparatorKind.match(line)
            if kind is not None:
                separators.append((offset, kind))
            offset += len(line) + 1
        return separators

    def slideBreaks_count(self) -> int:
        """Number of "---" separator lines"""
        return sum(1 for _, kind in self.separators_list() if kind is SeparatorKind.SLIDE)
