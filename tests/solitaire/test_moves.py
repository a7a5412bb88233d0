"""Unit tests for /src/solitaire/moves.py"""

import pytest

from src.solitaire.board import Board
from src.solitaire.moves import (
    MOVEMENT_RULES,
    SLIDING_PIECES,
    Move,
    PieceType,
    Square,
    bishop_rule,
    build_notation,
    has_collision,
    king_rule,
    knight_rule,
    pawn_rule,
    queen_rule,
    rook_rule,
    squares_between,
    unit_direction,
)

EMPTY_BOARD = "\n".join(["- - - -"] * 4)


# -- MOVE CREATION, ENCODING/DECODING NOTATION ---
@pytest.mark.parametrize(
    "notation, from_square, to_square",
    [
        ("2,2-1,1", Square(2, 2), Square(1, 1)),
        ("0,0-0,3", Square(0, 0), Square(0, 3)),
        ("3,1-1,2", Square(3, 1), Square(1, 2)),
    ],
)
def test_move_notation(notation: str, from_square: Square, to_square: Square) -> None:
    """Parsing logic: <from row>,<from col>-<to row>,<to col>"""
    move = Move.from_notation(notation)
    assert move.from_square == from_square
    assert move.to_square == to_square
    assert Move(from_square, to_square).to_notation() == notation


def test_build_notation() -> None:
    """Service glues the two squares of a request together"""
    assert build_notation("3,1", "2,0") == "3,1-2,0"
    assert Move.from_notation(build_notation("3,1", "2,0")) == Move(
        Square(3, 1), Square(2, 0)
    )


def test_move_delta_is_destination_minus_source() -> None:
    assert Move(Square(3, 1), Square(2, 0)).delta == (-1, -1)
    assert Move(Square(0, 0), Square(2, 1)).delta == (2, 1)


# --- MOVEMENT RULES ---
@pytest.mark.parametrize(
    "delta, expected",
    [((0, 1), True), ((1, 1), True), ((-1, 0), True), ((-1, -1), True), ((2, 0), False), ((1, 2), False)],
)
def test_king_rule(delta: tuple[int, int], expected: bool) -> None:
    """The king moves a single square in any direction"""
    assert king_rule(*delta) is expected


@pytest.mark.parametrize(
    "delta, expected",
    [((1, 2), True), ((2, 1), True), ((-2, -1), True), ((-1, 2), True), ((2, 2), False), ((0, 3), False), ((1, 1), False)],
)
def test_knight_rule(delta: tuple[int, int], expected: bool) -> None:
    """L-shapes only"""
    assert knight_rule(*delta) is expected


@pytest.mark.parametrize(
    "delta, expected",
    [((-1, 1), True), ((-1, -1), True), ((1, 1), False), ((1, -1), False), ((-1, 0), False), ((-2, 2), False), ((0, 1), False)],
)
def test_pawn_rule(delta: tuple[int, int], expected: bool) -> None:
    """Pawns capture one square diagonally up the board (row decreases), never backwards or straight"""
    assert pawn_rule(*delta) is expected


@pytest.mark.parametrize(
    "delta, expected",
    [((1, 1), True), ((-3, 3), True), ((2, -2), True), ((0, 2), False), ((1, 2), False), ((0, 0), False)],
)
def test_bishop_rule(delta: tuple[int, int], expected: bool) -> None:
    assert bishop_rule(*delta) is expected


@pytest.mark.parametrize(
    "delta, expected",
    [((0, 3), True), ((-2, 0), True), ((1, 1), False), ((0, 0), False), ((2, 1), False)],
)
def test_rook_rule(delta: tuple[int, int], expected: bool) -> None:
    """Exactly one of the two coordinates changes"""
    assert rook_rule(*delta) is expected


@pytest.mark.parametrize(
    "delta, expected",
    [((0, 3), True), ((3, 3), True), ((-2, 0), True), ((-1, 1), True), ((1, 2), False), ((0, 0), False), ((2, 3), False)],
)
def test_queen_rule(delta: tuple[int, int], expected: bool) -> None:
    """Union of the rook and bishop rules"""
    assert queen_rule(*delta) is expected


def test_every_piece_has_a_movement_rule() -> None:
    """The empty square is the only piece type that cannot move"""
    assert set(MOVEMENT_RULES.keys()) == set(PieceType) - {PieceType.EMPTY}
    assert SLIDING_PIECES == {PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}


# --- COLLISIONS ---
@pytest.mark.parametrize(
    "from_square, to_square, direction",
    [
        (Square(0, 0), Square(0, 3), (0, 1)),
        (Square(3, 3), Square(0, 0), (-1, -1)),
        (Square(3, 0), Square(0, 3), (-1, 1)),
        (Square(2, 1), Square(3, 1), (1, 0)),
    ],
)
def test_unit_direction(
    from_square: Square, to_square: Square, direction: tuple[int, int]
) -> None:
    assert unit_direction(from_square, to_square) == direction


def test_unit_direction_requires_a_line() -> None:
    """A knight jump does not lie on a line, so there is no direction to walk along"""
    with pytest.raises(ValueError):
        unit_direction(Square(0, 0), Square(2, 1))


@pytest.mark.parametrize(
    "from_square, to_square, expected",
    [
        (Square(0, 0), Square(0, 3), [Square(0, 1), Square(0, 2)]),
        (Square(3, 0), Square(0, 3), [Square(2, 1), Square(1, 2)]),
        (Square(3, 3), Square(1, 3), [Square(2, 3)]),
        (Square(1, 1), Square(2, 2), []),
    ],
)
def test_squares_between(
    from_square: Square, to_square: Square, expected: list[Square]
) -> None:
    """Start and end squares themselves are excluded"""
    assert squares_between(from_square, to_square) == expected


def test_no_collision_on_empty_path() -> None:
    """Only the two end points are occupied"""
    board = Board.from_text("R - - K\n- - - -\n- - - -\n- - - -")
    assert not has_collision(board, Square(0, 0), Square(0, 3))


def test_collision_with_blocker() -> None:
    """A piece in between blocks the line of sight"""
    board = Board.from_text("R - P K\n- - - -\n- - - -\n- - - -")
    assert has_collision(board, Square(0, 0), Square(0, 3))
    # the squares right next to each other never collide
    assert not has_collision(board, Square(0, 2), Square(0, 3))


def test_collision_on_diagonal() -> None:
    board = Board.from_text("- - - N\n- - - -\n- P - -\nQ - - -")
    assert has_collision(board, Square(3, 0), Square(0, 3))
