"""
Models package for remarklive

Contains data structures and type definitions for live sync and the CLI pipeline.
"""

from .state import ProgramState, SyncState, pipeline
from .separators import SeparatorKind, LAYOUT_PRAGMA, layoutPragma_is
from .edits import EditResult, SaveOutcome

__all__ = [
    "ProgramState",
    "SyncState",
    "pipeline",
    "SeparatorKind",
    "LAYOUT_PRAGMA",
    "layoutPragma_is",
    "EditResult",
    "SaveOutcome",
]
