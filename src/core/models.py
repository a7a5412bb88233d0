"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make PuzzleModel easier to read
BoardText = str
MoveNotation = str


@dataclass
class PuzzleModel:
    """Transport-safe representation of a solitaire chess puzzle used between API, Service, DB, and Puzzle layers."""

    initial_board: BoardText
    current_board: BoardText
    moves: list[MoveNotation]
    status: str
