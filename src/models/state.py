"""
Program state models and pipeline helper

Defines ProgramState dataclass for the functional CLI pipeline, the
per-session SyncState used by live previews, and the pipeline() helper
for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the batch preview pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, templateFile,
          outputFile, cursor
        - env_check: inputSourceFile, templateSourceFile, htmlOutputFile, envOK
        - deck_read: deckText
        - preview_materialize: materializeResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the deck
        outputdir: Directory the preview artifact is written to
        verbosity: Logging verbosity level (1-3)
        inputFile: Deck filename (relative to inputdir)
        templateFile: Optional template path; bundled template when None
        outputFile: Artifact filename (relative to outputdir)
        cursor: Optional cursor offset whose slide index is reported
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the deck
        templateSourceFile: Resolved path to the template
        htmlOutputFile: Path of the artifact to write
        deckText: Deck contents
        materializeResult: Run results (output_file, slide_count, slide)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="slides.md")
    templateFile: Optional[str] = field(default=None)
    outputFile: Optional[str] = field(default=None)
    cursor: Optional[int] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    templateSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    deckText: Optional[str] = field(default=None)
    materializeResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, templateFile, etc.)
            inputdir: Directory containing the deck
            outputdir: Directory for the preview artifact

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


@dataclass
class SyncState:
    """
    Per-session live sync state

    Holds the cursor position last pushed to the preview and the single
    pending debounce timer. One instance exists per live session; it is
    discarded when the session stops.

    Attributes:
        lastSyncedPosition: Cursor offset of the last sync (None before the first)
        pendingTimer: The armed timer handle, or None when idle
    """
    lastSyncedPosition: Optional[int] = None
    pendingTimer: Optional[Any] = None  # asyncio.TimerHandle at runtime

    @property
    def armed(self) -> bool:
        """True while a timer is pending (a cancelled handle does not count)"""
        return self.pendingTimer is not None and not self.pendingTimer.cancelled()


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            deck_read,
            preview_materialize,
            results_report
        )

    This is equivalent to:
        results_report(preview_materialize(deck_read(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
