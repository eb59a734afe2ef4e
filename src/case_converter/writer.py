"""
File writer and mover for committing the case change.

This module is responsible for:
- Rewriting the target file in place with transformed lines
- Ending every line with a single \\n, including the last one
- Moving the rewritten file from the source to the destination directory
- Refusing to overwrite an existing file at the destination
- Catching and recording errors (permissions, cross-device, missing paths)
- Logging all operations
"""

import logging
import shutil
from pathlib import Path
from typing import Sequence, Union

from .transform import CaseFunction, transform_lines
from .types import MoveResult, MoveStatus, ProcessResult, RunConfig, WriteResult
from .utils import resolve_in_directory

logger = logging.getLogger(__name__)


def write_lines(
    filename: Union[str, Path],
    lines: Sequence[str],
    transform: CaseFunction
) -> WriteResult:
    """
    Overwrite a file with transformed lines.

    The file is truncated first. Each line is passed through transform and
    written followed by "\\n", so the result always ends with a newline and
    uses one line-ending style regardless of the original.

    Args:
        filename: Name or path of the file to rewrite
        lines: Newline-stripped lines to write, in order
        transform: Case function applied to every line

    Returns:
        WriteResult with the number of lines written
    """
    path = str(filename)
    written = 0

    logger.info(f"Rewriting: {path}")

    try:
        with open(path, "w", newline="\n") as writer:
            for line in transform_lines(lines, transform):
                writer.write(line + "\n")
                written += 1
    except OSError as e:
        logger.error(f"Failed to write {path} after {written} lines: {e}")
        return WriteResult(
            path=path,
            lines_written=written,
            success=False,
            message=f"{type(e).__name__}: {e}"
        )

    logger.info(f"Wrote {written} lines to {path}")
    return WriteResult(
        path=path,
        lines_written=written,
        success=True,
        message="Rewritten successfully"
    )


def move_file(
    src_path: Union[str, Path],
    dest_path: Union[str, Path]
) -> MoveResult:
    """
    Move a single file from source to destination.

    Handles:
    - Missing source (SKIPPED_MISSING status)
    - Existing destination (SKIPPED_EXISTS status, nothing overwritten)
    - Missing destination directory (ERROR status, never created)
    - Permission errors
    - Cross-device moves (via shutil.move copy+delete)

    Args:
        src_path: Source file path
        dest_path: Destination file path

    Returns:
        MoveResult with status and details
    """
    src_path = Path(src_path)
    dest_path = Path(dest_path)

    if not src_path.exists():
        logger.error(f"Source missing: {src_path}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=None,
            status=MoveStatus.SKIPPED_MISSING,
            message=f"Source file does not exist: {src_path}"
        )

    if not src_path.is_file():
        logger.error(f"Source is not a file: {src_path}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=None,
            status=MoveStatus.ERROR,
            message=f"Source path is not a file: {src_path}"
        )

    if dest_path.exists():
        logger.error(f"Destination already exists: {dest_path}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=str(dest_path),
            status=MoveStatus.SKIPPED_EXISTS,
            message=f"Destination already exists: {dest_path}"
        )

    if not dest_path.parent.is_dir():
        logger.error(f"Destination directory missing: {dest_path.parent}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=str(dest_path),
            status=MoveStatus.ERROR,
            message=f"Destination directory does not exist: {dest_path.parent}"
        )

    try:
        logger.info(f"Moving: {src_path} -> {dest_path}")
        shutil.move(str(src_path), str(dest_path))

        return MoveResult(
            source_path=str(src_path),
            dest_path=str(dest_path),
            status=MoveStatus.SUCCESS,
            message="Moved successfully"
        )

    except PermissionError as e:
        logger.error(f"Permission denied moving {src_path}: {e}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=str(dest_path),
            status=MoveStatus.ERROR,
            message=f"Permission denied: {e}"
        )

    except OSError as e:
        logger.error(f"OS error moving {src_path}: {e}")
        return MoveResult(
            source_path=str(src_path),
            dest_path=str(dest_path),
            status=MoveStatus.ERROR,
            message=f"{type(e).__name__}: {e}"
        )


def write_and_move(
    filename: Union[str, Path],
    lines: Sequence[str],
    transform: CaseFunction,
    config: RunConfig
) -> ProcessResult:
    """
    Rewrite the file, then move it if the configuration asks for it.

    A failed write skips the move. A failed move prints an error and leaves
    the rewritten file where it is; the case change is not rolled back.

    Args:
        filename: Name of the file to rewrite and move
        lines: Newline-stripped lines read from the file
        transform: Case function applied to every line
        config: Run configuration with the move settings

    Returns:
        ProcessResult with the write result and, if attempted, the move result
    """
    result = ProcessResult()

    result.write = write_lines(filename, lines, transform)
    if not result.write.success:
        print(f"Error writing file: {result.write.message}")
        return result

    if not config.move_requested:
        return result

    src = resolve_in_directory(config.source_dir, filename)
    # Absolute filenames land in target_dir under their base name
    dest_name = Path(filename).name if Path(filename).is_absolute() else filename
    dest = resolve_in_directory(config.target_dir, dest_name)

    result.move = move_file(src, dest)
    if not result.move.success:
        print(f"Error moving file: {result.move.message}")

    return result
