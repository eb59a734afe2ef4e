"""
Interactive prompts for collecting the run configuration.

This module is responsible for:
- Asking whether the rewritten file should be moved
- Asking for the source and destination directories of a move
- Asking for the case mode
- Re-prompting until each answer is valid
- Turning a closed input stream into InputClosedError

Nothing here touches the target file.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .errors import InputClosedError
from .types import CaseMode, RunConfig
from .utils import is_existing_directory

logger = logging.getLogger(__name__)

MOVE_PROMPT = "Would you like to put the new file in different directory? Y/N"
SOURCE_DIR_PROMPT = "Enter the path for the current location of the file: "
TARGET_DIR_PROMPT = "Enter the path for the destination location of the file: "
CASE_PROMPT = 'Upper- or lowercase? (Type "Upper" or "lower")'
INVALID_PATH_MESSAGE = "Invalid path; try again."

InputFunction = Callable[[], str]


def _ask(message: str, input_fn: InputFunction) -> str:
    """Print a prompt on its own line and read one line of input."""
    print(message)
    try:
        return input_fn()
    except EOFError:
        raise InputClosedError(f"Input closed while waiting for: {message.strip()}") from None


def prompt_yes_no(message: str, input_fn: Optional[InputFunction] = None) -> bool:
    """
    Ask a Y/N question until the answer is exactly Y or N (any case).

    Any other answer re-prompts without an error message.

    Args:
        message: The question to print
        input_fn: Callable returning one line of input (defaults to input)

    Returns:
        True for Y, False for N

    Raises:
        InputClosedError: If input ends before a valid answer
    """
    input_fn = input_fn or input
    while True:
        answer = _ask(message, input_fn).upper()
        if answer == "Y":
            return True
        if answer == "N":
            return False
        logger.debug(f"Unrecognized yes/no answer: {answer!r}")


def prompt_case_mode(input_fn: Optional[InputFunction] = None) -> CaseMode:
    """
    Ask for the case mode until the answer is "upper" or "lower".

    Surrounding whitespace and letter case of the answer are ignored.

    Raises:
        InputClosedError: If input ends before a valid answer
    """
    input_fn = input_fn or input
    while True:
        answer = _ask(CASE_PROMPT, input_fn).strip().lower()
        if answer == CaseMode.UPPER.value:
            return CaseMode.UPPER
        if answer == CaseMode.LOWER.value:
            return CaseMode.LOWER
        logger.debug(f"Unrecognized case mode: {answer!r}")


def prompt_directory_path(message: str, input_fn: Optional[InputFunction] = None) -> Path:
    """
    Ask for a directory path until it names an existing directory.

    Malformed, missing and non-directory paths all print
    "Invalid path; try again." and re-prompt.

    Args:
        message: The prompt to print
        input_fn: Callable returning one line of input (defaults to input)

    Returns:
        The entered path, trimmed and with ~ expanded

    Raises:
        InputClosedError: If input ends before a valid answer
    """
    input_fn = input_fn or input
    while True:
        answer = _ask(message, input_fn).strip()
        if is_existing_directory(answer):
            return Path(answer).expanduser()
        logger.debug(f"Rejected directory path: {answer!r}")
        print(INVALID_PATH_MESSAGE)


def collect_run_config(input_fn: Optional[InputFunction] = None) -> RunConfig:
    """
    Run all prompts in order and build the run configuration.

    The directory prompts are only shown when a move is requested.

    Raises:
        InputClosedError: If input ends before all answers are given
    """
    move_requested = prompt_yes_no(MOVE_PROMPT, input_fn)

    source_dir = None
    target_dir = None
    if move_requested:
        source_dir = prompt_directory_path(SOURCE_DIR_PROMPT, input_fn)
        target_dir = prompt_directory_path(TARGET_DIR_PROMPT, input_fn)

    case_mode = prompt_case_mode(input_fn)

    config = RunConfig(
        move_requested=move_requested,
        source_dir=source_dir,
        target_dir=target_dir,
        case_mode=case_mode,
    )
    logger.info(
        f"Run config: case={config.case_mode.value}, move={config.move_requested}, "
        f"source={config.source_dir}, target={config.target_dir}"
    )
    return config
