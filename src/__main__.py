#!/usr/bin/env python3
"""
remarklive - Live preview core for remark slide decks

Batch entry point: materializes a single-file remark deck into its HTML
preview, the same artifact a live editing session writes on every save.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Deck format:
    - Slides are separated by lines starting with ---
    - Incremental steps by lines starting with --
    - Presenter notes by lines starting with ???
    - A "layout: true" line turns the following slide into a template

Usage:
    remarklive inputdir/ outputdir/ --inputFile slides.md

Examples:
    # Basic preview build with the bundled remark template
    remarklive . . --inputFile slides.md

    # Custom template and output name, report the slide at offset 120
    remarklive . public/ --inputFile talk.md --templateFile theme.html \\
        --outputFile talk.html --cursor 120

    # Verbose output
    remarklive . . --inputFile slides.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Document, Materializer, RemarkLiveError, slide_locateAt, __version__, LOG, state_connectToLogger
from .lib.materializer import artifact_publish
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                              _    _ _
  _ __ ___ _ __ ___   __ _ _ __| | _| (_)_   _____
 | '__/ _ \ '_ ` _ \ / _` | '__| |/ / | \ \ / / _ \
 | | |  __/ | | | | | (_| | |  |   <| | |\ V /  __/
 |_|  \___|_| |_| |_|\__,_|_|  |_|\_\_|_| \_/ \___|

  Live preview for remark decks
"""

parser = ArgumentParser(
    description="remarklive - materialize a remark deck into its HTML preview",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", default="slides.md", type=str, help="Deck file (relative to inputdir)"
)

parser.add_argument(
    "--templateFile",
    default=None,
    type=str,
    help="HTML template containing the </textarea> marker. Defaults to the bundled remark template",
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Preview filename within outputdir. Defaults to REMARKLIVE_OUTPUT_FILENAME (index.html)",
)

parser.add_argument(
    "--cursor",
    default=None,
    type=int,
    help="Cursor offset into the deck; its slide number is reported",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the deck
            - templateSourceFile: Resolved path to the template
            - htmlOutputFile: Path of the preview artifact
            - envOK: True if environment is valid

    Exits:
        1 if the deck or template is missing
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.templateFile:
        state.templateSourceFile = state.inputdir / state.templateFile
    else:
        state.templateSourceFile = Path(appsettings.default_template)

    if not state.templateSourceFile.exists():
        print(f"Error: Template not found: {state.templateSourceFile}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Template: {state.templateSourceFile}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.htmlOutputFile = state.outputdir / (state.outputFile or appsettings.output_filename)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def deck_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the deck source.

    Returns:
        ProgramState with added field:
            - deckText: Deck contents

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading deck...", level=1)

    try:
        state.deckText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.deckText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def preview_materialize(inputstate: ProgramState) -> ProgramState:
    """
    Splice the deck into the template and write the preview.

    Returns:
        ProgramState with added field:
            - materializeResult: Dict containing:
                - status: bool
                - output_file: str (resolved artifact path)
                - slide_count: int (number of "---" slides)
                - slide: Optional[int] (slide at --cursor)

    Exits:
        1 if the template is malformed or the output cannot be written
    """

    state = inputstate.copy()

    LOG("Materializing preview...", level=1)

    if state.deckText is None:
        print("Error: No deck source available", file=sys.stderr)
        sys.exit(1)

    try:
        materializer = Materializer(templatePath=state.templateSourceFile)
        written = artifact_publish(materializer.artifact_build(state.deckText), state.htmlOutputFile)
    except RemarkLiveError as e:
        print(f"Materialize error: {e}", file=sys.stderr)
        sys.exit(1)

    document = Document(state.deckText)
    state.materializeResult = {
        'status': True,
        'output_file': str(written),
        'slide_count': document.slideBreaks_count() + 1,
        'slide': slide_locateAt(state.deckText, state.cursor) if state.cursor is not None else None,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display results to the user (terminal pipeline stage).

    Exits:
        1 if materializeResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.materializeResult:
        print("Error: Materialization failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Preview written!", level=1)
    LOG(f"  Output: {state.materializeResult['output_file']}", level=1)
    LOG(f"  Slides: {state.materializeResult['slide_count']}", level=1)
    if state.materializeResult['slide'] is not None:
        LOG(f"  Cursor {state.cursor} is on slide {state.materializeResult['slide']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="remarklive - remark deck preview",
    category="Visualization",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - materialize a remark deck into its HTML preview.

    Pipeline:
        1. env_check: Validate paths and environment
        2. deck_read: Read the deck
        3. preview_materialize: Splice into the template and write
        4. results_report: Display results to user
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, deck_read, preview_materialize, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
