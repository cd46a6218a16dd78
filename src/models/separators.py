"""
Separator and pragma tokens

Defines the line-start tokens that divide a deck into slides, incremental
steps and presenter notes, plus the layout pragma that shifts slide counting.
"""

from enum import Enum
from typing import Optional


class SeparatorKind(Enum):
    """
    Kinds of separator lines in a remark deck

    A separator is recognised by the token its line starts with, so a
    line reading "---" is also a line starting with "--". match() checks
    the longer token first.
    """
    SLIDE = "---"          # new slide
    INCREMENTAL = "--"     # incremental continuation of the current slide
    NOTE = "???"           # presenter notes for the current slide

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def match(cls, line: str) -> Optional["SeparatorKind"]:
        """
        Classify a line by its leading separator token

        Args:
            line: A single line of the deck (without newline)

        Returns:
            The separator kind, or None for ordinary content lines

        Example:
            >>> SeparatorKind.match("--- class: center")
            <SeparatorKind.SLIDE: '---'>
            >>> SeparatorKind.match("-- ")
            <SeparatorKind.INCREMENTAL: '--'>
        """
        for kind in (cls.SLIDE, cls.NOTE, cls.INCREMENTAL):
            if line.startswith(kind.value):
                return kind
        return None

    @classmethod
    def fromName(cls, name: str) -> "SeparatorKind":
        """Look up a kind by enum name or token (case-insensitive names)"""
        for kind in cls:
            if name == kind.value or name.upper() == kind.name:
                return kind
        raise ValueError(f"Unknown separator kind: {name!r}")


# Metadata line that applies a shared template to following slides
LAYOUT_PRAGMA: str = "layout: true"


def layoutPragma_is(line: str) -> bool:
    """Check if a line is a layout pragma"""
    return line.startswith(LAYOUT_PRAGMA)
