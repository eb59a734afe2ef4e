"""
Type definitions and data classes for the case converter application.

This module defines:
- CaseMode: Enum for the selected case transformation
- RunConfig: Immutable answers collected from the user for one run
- ReadResult: Lines read from the target file, plus any read error
- WriteResult: Outcome of rewriting the target file
- MoveStatus: Enum for move operation outcomes
- MoveResult: Data class representing the result of a move operation
- ProcessResult: Combined outcome of the write and move steps
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class CaseMode(Enum):
    """Case transformation applied to every line."""
    UPPER = "upper"
    LOWER = "lower"


@dataclass(frozen=True)
class RunConfig:
    """
    Answers collected from the interactive prompts.

    Attributes:
        move_requested: Whether the rewritten file should be moved
        source_dir: Directory the file currently lives in (move only)
        target_dir: Directory the file should be moved to (move only)
        case_mode: The case transformation to apply
    """
    move_requested: bool
    source_dir: Optional[Path] = None
    target_dir: Optional[Path] = None
    case_mode: CaseMode = CaseMode.LOWER

    def __post_init__(self):
        has_dirs = self.source_dir is not None and self.target_dir is not None
        has_any_dir = self.source_dir is not None or self.target_dir is not None

        if self.move_requested and not has_dirs:
            raise ValueError("Both source_dir and target_dir are required for a move")
        if not self.move_requested and has_any_dir:
            raise ValueError("source_dir and target_dir must be unset when no move is requested")


@dataclass
class ReadResult:
    """Lines read from a file. error is set when the read did not complete."""
    path: str
    lines: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class WriteResult:
    """Result of rewriting a file."""
    path: str
    lines_written: int
    success: bool
    message: str


class MoveStatus(Enum):
    """Status of a file move operation."""
    SUCCESS = "success"                  # Moved successfully
    SKIPPED_MISSING = "skipped_missing"  # Source does not exist
    SKIPPED_EXISTS = "skipped_exists"    # Destination name already taken
    ERROR = "error"                      # Failed due to error


@dataclass
class MoveResult:
    """Result of a move operation."""
    source_path: str
    dest_path: Optional[str]
    status: MoveStatus
    message: str

    @property
    def success(self) -> bool:
        return self.status == MoveStatus.SUCCESS


@dataclass
class ProcessResult:
    """Outcome of the write step and, when requested, the move step."""
    write: Optional[WriteResult] = None
    move: Optional[MoveResult] = None

    @property
    def ok(self) -> bool:
        if self.write is None or not self.write.success:
            return False
        return self.move is None or self.move.success
