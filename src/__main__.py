#!/usr/bin/env python3
"""
swingpen - Export code swings to an online pen viewer

Reads a swing (a directory holding a markup file, a script file, a
stylesheet, and optionally a codeswing.json library manifest plus raw
"scripts"/"styles" tag lists), assembles a pen definition, uploads it to
a paste host and prints the viewer URL that loads it.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    swingpen inputdir/ outputdir/ --swingDir my-swing

    outputdir/ receives pen.json (the uploaded definition) and
    pen_url.txt (the viewer URL).

Examples:
    # Export the swing at the root of inputdir
    swingpen . output/

    # Export a sub-directory and open the result
    swingpen swings/ output/ --swingDir clock --openBrowser

    # Verbose output
    swingpen . output/ -vv
"""

import asyncio
import sys
import webbrowser
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from pathlib import Path

from chris_plugin import chris_plugin
from .lib import swing_export, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


parser = ArgumentParser(
    description="swingpen - Export code swings to an online pen viewer",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--swingDir",
    default=".",
    type=str,
    help="Swing directory (relative to inputdir)",
)

parser.add_argument(
    "--openBrowser",
    default=False,
    action="store_true",
    help="Open the viewer URL in a web browser after upload",
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
    Validate environment and resolve the swing directory.

    Returns:
        ProgramState with added fields:
            - swingPath: Resolved swing directory
            - envOK: True if environment is valid

    Exits:
        1 if the swing directory is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    swing_path = state.inputdir / state.swingDir
    if not swing_path.is_dir():
        print(f"Error: Swing directory not found: {swing_path}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.swingPath = swing_path
    LOG(f"Swing directory: {swing_path}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def pen_export(inputstate: ProgramState) -> ProgramState:
    """
    Assemble, upload and link the pen definition for the swing.

    Returns:
        ProgramState with added field:
            - exportResult: ExportResult (pen, link, viewer url)

    Exits:
        1 on a malformed manifest or any network failure
    """
    state = inputstate.copy()

    LOG("Exporting swing...", level=1)

    try:
        state.exportResult = asyncio.run(swing_export(state.swingPath))
    except Exception as e:
        print(f"Export error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_save(inputstate: ProgramState) -> ProgramState:
    """
    Write the uploaded definition and viewer URL to outputdir.

    Returns:
        ProgramState with added fields:
            - penFile: Path to pen.json
            - urlFile: Path to pen_url.txt
    """
    state = inputstate.copy()

    if not state.exportResult:
        print("Error: No export result available", file=sys.stderr)
        sys.exit(1)

    state.penFile = state.outputdir / "pen.json"
    state.penFile.write_text(state.exportResult.pen.json_serialize(), encoding="utf-8")
    LOG(f"Wrote {state.penFile}", level=2)

    state.urlFile = state.outputdir / "pen_url.txt"
    state.urlFile.write_text(state.exportResult.url + "\n", encoding="utf-8")
    LOG(f"Wrote {state.urlFile}", level=2)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display the viewer URL, opening it in a browser if asked to.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if not state.exportResult:
        print("Error: Export failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Export successful!", level=1)
    LOG(f"  Pen:  {state.exportResult.pen.title}", level=1)
    LOG(f"  Link: {state.exportResult.link}", level=1)
    LOG(f"  View: {state.exportResult.url}", level=1)

    if state.openBrowser:
        webbrowser.open(state.exportResult.url)
    return state


@chris_plugin(
    parser=parser,
    title="swingpen - Export code swings to an online pen viewer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - export a swing to the pen viewer.

    Orchestrates the export pipeline:
        1. env_check: Validate paths
        2. pen_export: Assemble and upload the pen definition
        3. results_save: Write pen.json and pen_url.txt
        4. results_report: Show (and optionally open) the viewer URL

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, pen_export, results_save, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
