"""
Text file reader for loading the target file into memory.

This module is responsible for:
- Reading the file line by line with the platform default encoding
- Stripping line terminators (\\n, \\r\\n and \\r are all recognized)
- Logging read failures with a traceback instead of raising
- Keeping whatever was read before a failure
"""

import logging
from pathlib import Path
from typing import List, Union

from .types import ReadResult

logger = logging.getLogger(__name__)


def read_file(filename: Union[str, Path]) -> ReadResult:
    """
    Load every line of a text file, in order.

    Errors are never raised. A missing file, permission problem or decode
    error is logged and recorded in the result, which still carries any lines
    read before the failure. Check ReadResult.success to tell an empty file
    from a failed read.

    Args:
        filename: Name or path of the file to read

    Returns:
        ReadResult with the newline-stripped lines
    """
    path = str(filename)
    lines: List[str] = []

    logger.info(f"Reading: {path}")

    try:
        with open(path, "r") as reader:
            for line in reader:
                lines.append(line.rstrip("\n"))
    except (OSError, UnicodeDecodeError) as e:
        logger.exception(f"Failed to read {path}")
        return ReadResult(path=path, lines=lines, error=f"{type(e).__name__}: {e}")

    logger.info(f"Read {len(lines)} lines from {path}")
    return ReadResult(path=path, lines=lines)
