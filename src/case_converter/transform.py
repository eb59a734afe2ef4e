"""
Case transformations applied to each line of the target file.
"""

from typing import Callable, Dict, Iterable, List

from .types import CaseMode

CaseFunction = Callable[[str], str]


def to_upper(text: str) -> str:
    """Return text with every letter uppercased."""
    return text.upper()


def to_lower(text: str) -> str:
    """Return text with every letter lowercased."""
    return text.lower()


_TRANSFORMS: Dict[CaseMode, CaseFunction] = {
    CaseMode.UPPER: to_upper,
    CaseMode.LOWER: to_lower,
}


def get_transform(mode: CaseMode) -> CaseFunction:
    """
    Look up the case function for a case mode.

    Raises:
        ValueError: If mode is not a CaseMode
    """
    try:
        return _TRANSFORMS[mode]
    except KeyError:
        raise ValueError(f"Unknown case mode: {mode!r}") from None


def transform_lines(lines: Iterable[str], transform: CaseFunction) -> List[str]:
    """Apply transform to every line, keeping order and count."""
    return [transform(line) for line in lines]
