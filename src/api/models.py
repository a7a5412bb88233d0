"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status

MoveNotation = str
BoardText = str

SQUARE_NOTATION = re.compile(r"^\d+,\d+$")


# --- REQUEST MODELS ---
class CreatePuzzleRequest(BaseModel):
    board_text: BoardText

    @field_validator("board_text")
    @classmethod
    def validate_board_text(cls, value: str) -> str:
        # NOTE: only blank input is rejected here. Malformed boards become puzzles with status 'invalid input'.
        if not value.strip():
            raise InvalidRequestError("Board description cannot be empty.")
        return value


class GetPuzzleRequest(BaseModel):
    puzzle_id: UUID


class ListPuzzlesRequest(BaseModel):
    status: Optional[Status] = None


class LegalMovesRequest(BaseModel):
    puzzle_id: UUID


class MoveRequest(BaseModel):
    puzzle_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.replace(" ", "")
        if not SQUARE_NOTATION.match(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a square. Expected 'row,col'."
            )
        return value


class HintRequest(BaseModel):
    puzzle_id: UUID


class SolveRequest(BaseModel):
    puzzle_id: UUID


class RestartRequest(BaseModel):
    puzzle_id: UUID


class DeletePuzzleRequest(BaseModel):
    puzzle_id: UUID


# --- RESPONSE MODELS ---
class PuzzleResponse(BaseModel):
    puzzle_id: UUID
    board: BoardText
    starting_board: BoardText
    move_history: list[MoveNotation]
    status: Status


class PuzzleListResponse(BaseModel):
    puzzles: list[PuzzleResponse]


class LegalMovesResponse(BaseModel):
    puzzle_id: UUID
    legal_moves: list[MoveNotation]


class HintResponse(BaseModel):
    puzzle_id: UUID
    move: Optional[MoveNotation]
    board: BoardText
    status: Status


class SolutionStep(BaseModel):
    move: MoveNotation
    board: BoardText


class SolutionResponse(BaseModel):
    puzzle_id: UUID
    steps: list[SolutionStep]
    status: Status
