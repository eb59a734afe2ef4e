class CaseConverterError(Exception):
    """Base error for the project."""


class InputClosedError(CaseConverterError):
    """Standard input ended before a prompt received a valid answer."""
