"""
Edit and save result models

Type-safe structures returned to the host editor by the live session.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class EditResult:
    """
    Document snapshot after a navigation or editing command

    Navigation commands return the input text unchanged with a new cursor;
    editing commands return the edited text. The host applies both.

    Attributes:
        text: Full document text after the command
        cursor: Cursor offset into text after the command

    Example:
        slide_next("A\\n---\\nB", 0) -> EditResult(text="A\\n---\\nB", cursor=2)
    """
    text: str
    cursor: int


@dataclass(frozen=True)
class SaveOutcome:
    """
    Result of handling a save event

    Attributes:
        published: True if the preview artifact was regenerated
        outputPath: Resolved path of the written artifact (None if skipped)
        hint: Message for the user when no live session was active
    """
    published: bool
    outputPath: Optional[Path] = None
    hint: Optional[str] = None
