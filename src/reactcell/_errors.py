"""reactcell error hierarchy.

All reactcell-specific errors inherit from ReactCellError for easy catching.
"""


class ReactCellError(Exception):
    """Base error for all reactcell operations."""


class InvalidListenerError(ReactCellError, TypeError):
    """listen() was given something that cannot be called."""
