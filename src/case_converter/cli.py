"""
Command-line interface for case-converter.

This module is responsible for argument parsing, logging setup and running
the prompt -> read -> rewrite -> move pipeline once.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import InputClosedError
from .prompts import InputFunction, collect_run_config
from .reader import read_file
from .transform import get_transform
from .writer import write_and_move

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Must provide name of a file as a command line argument."
COMPLETED_MESSAGE = "Process completed."

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger based on a verbosity count.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="case-converter",
        description=(
            "Convert every letter in a text file to upper- or lowercase, "
            "optionally moving the result to another directory."
        ),
    )

    # nargs="*" so a wrong count gets our own message instead of argparse's
    parser.add_argument(
        "filenames",
        nargs="*",
        metavar="filename",
        help="Name of the text file to convert.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def run(filename: str, input_fn: Optional[InputFunction] = None) -> int:
    """
    Run the whole pipeline for one file.

    Prints "Process completed." once the pipeline has run, whether or not a
    step failed; the return code tells the two apart.

    Returns:
        EXIT_OK if every step succeeded, EXIT_FAILURE otherwise
    """
    config = collect_run_config(input_fn)

    read_result = read_file(filename)
    if not read_result.success:
        # Rewriting now would truncate the file to whatever was read
        print(f"Error reading file: {read_result.error}")
        print(COMPLETED_MESSAGE)
        return EXIT_FAILURE

    transform = get_transform(config.case_mode)
    result = write_and_move(filename, read_result.lines, transform, config)

    print(COMPLETED_MESSAGE)

    if not result.ok:
        logger.warning(f"Finished with errors for {filename}")
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[List[str]] = None, input_fn: Optional[InputFunction] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if len(args.filenames) != 1:
        print(USAGE_MESSAGE, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    configure_logging(verbosity=args.verbose)

    try:
        return run(args.filenames[0], input_fn)
    except InputClosedError as e:
        logger.debug(str(e))
        print("Input closed before all answers were given.", file=sys.stderr)
        return EXIT_FAILURE
