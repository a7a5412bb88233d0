"""
Custom exceptions shared across layers.

NOTE: not ValueError subclasses. pydantic validators re-raise them unchanged instead of wrapping them in a ValidationError.
"""


class PuzzleError(Exception):
    """Top-level exception for anything going wrong while playing/solving a puzzle."""


class InvalidMoveError(PuzzleError):
    """A move was attempted that is not a legal capture on the current board."""


class PuzzleStateError(PuzzleError):
    """The puzzle is not in a state that allows the requested operation."""


class InvalidRequestError(PuzzleError):
    """Request data could not be interpreted."""


class RepositoryError(PuzzleError):
    """Persistence layer could not find/store the requested record."""
