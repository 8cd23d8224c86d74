"""Board - piece placement on an 8x8 grid, plus make/unmake of moves."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from clickchess.core.enums import Color, MoveFlag, PieceType
from clickchess.core.move import Move
from clickchess.core.piece import Piece
from clickchess.core.types import BOARD_SIZE, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Castling: the king starts on the e-file of its back rank, the rooks
# in the corners, at these file distances from the king.
KING_HOME_FILE = 4
KINGSIDE_ROOK_OFFSET = 3
QUEENSIDE_ROOK_OFFSET = -4


@dataclass(slots=True)
class _MoveState:
    """Snapshot saved before each move so we can undo it."""

    move: Move
    piece: Piece
    castling_right: bool
    captured: Piece | None = None
    rook: Piece | None = None
    rook_castling_right: bool = False
    # Pawns whose en-passant flag was set before the move.
    double_stepped: list[Piece] = field(default_factory=list)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Single source of truth for piece placement.  Supports
    :meth:`make_move` / :meth:`unmake_move` via an internal history stack,
    used both for real moves and for simulate-and-revert legality checks.
    """

    __slots__ = ("_grid", "_history")

    def __init__(self) -> None:
        # [rank][file]
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._history: list[_MoveState] = []

    @staticmethod
    def _check(sq: Square) -> None:
        if not (0 <= sq[0] < BOARD_SIZE and 0 <= sq[1] < BOARD_SIZE):
            raise ValueError(f"Square off board: {tuple(sq)}")

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        self._check(sq)
        return self._grid[sq[1]][sq[0]]

    __getitem__ = get

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    def place(self, sq: Square, piece: Piece) -> None:
        """Put *piece* on the empty square *sq*."""
        if self.get(sq) is not None:
            raise ValueError(f"Square {Square(*sq)} is occupied")
        piece.position = Square(*sq)
        self._grid[sq[1]][sq[0]] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Lift and return whatever stands on *sq*."""
        piece = self.get(sq)
        self._grid[sq[1]][sq[0]] = None
        return piece

    def move_unchecked(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq* to *to_sq* without rule checks.

        Returns the piece that stood on *to_sq*, if any.
        """
        piece = self.remove(from_sq)
        if piece is None:
            raise ValueError(f"No piece on {Square(*from_sq)}")
        displaced = self.remove(to_sq)
        self.place(to_sq, piece)
        return displaced

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[Piece]:
        """All pieces, optionally only those of *color*."""
        for row in self._grid:
            for piece in row:
                if piece is not None and (color is None or piece.color == color):
                    yield piece

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    def kings(self, color: Color) -> list[Piece]:
        return [p for p in self.pieces(color) if p.is_king]

    def placement(self) -> dict[Square, tuple[Color, PieceType]]:
        """Colour and kind on every occupied square, flags ignored."""
        return {p.position: (p.color, p.piece_type) for p in self.pieces()}

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for piece in self.pieces(color):
            if piece.is_king:
                return piece.position
        raise ValueError(f"No {color.name} king on board")

    # -- Core move operations -----------------------------------------------

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack.

        Handles the castling rook, the en-passant capture and the
        board-wide reset of en-passant eligibility.  Legality is not checked.
        """
        piece = self.get(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        state = _MoveState(
            move=move,
            piece=piece,
            castling_right=piece.castling_right,
            double_stepped=[p for p in self.pieces() if p.just_double_stepped],
        )

        # En passant: the captured pawn sits beside the origin, not on to_sq
        if move.flag == MoveFlag.EN_PASSANT:
            state.captured = self.remove(Square(move.to_sq.file, move.from_sq.rank))
            assert state.captured is not None

        if move.is_castle:
            rook_from, rook_to = _castle_rook_squares(move)
            rook = self.get(rook_from)
            assert rook is not None
            state.rook = rook
            state.rook_castling_right = rook.castling_right
            self.move_unchecked(rook_from, rook_to)
            rook.castling_right = False

        captured = self.move_unchecked(move.from_sq, move.to_sq)
        if captured is not None:
            state.captured = captured

        for pawn in state.double_stepped:
            pawn.just_double_stepped = False
        if move.flag == MoveFlag.DOUBLE_PAWN:
            piece.just_double_stepped = True

        if piece.is_king or piece.is_rook:
            piece.castling_right = False

        self._history.append(state)

    def unmake_move(self) -> Move:
        """Revert the most recent :meth:`make_move` and return its move."""
        if not self._history:
            raise ValueError("No move to undo")
        state = self._history.pop()
        move = state.move
        piece = state.piece

        self.move_unchecked(move.to_sq, move.from_sq)
        piece.castling_right = state.castling_right
        piece.just_double_stepped = False

        if state.rook is not None:
            rook_from, rook_to = _castle_rook_squares(move)
            self.move_unchecked(rook_to, rook_from)
            state.rook.castling_right = state.rook_castling_right

        if state.captured is not None:
            if move.flag == MoveFlag.EN_PASSANT:
                self.place(Square(move.to_sq.file, move.from_sq.rank), state.captured)
            else:
                self.place(move.to_sq, state.captured)

        for pawn in state.double_stepped:
            pawn.just_double_stepped = True
        return move

    @property
    def history_size(self) -> int:
        return len(self._history)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy without history."""
        b = Board()
        for piece in self.pieces():
            b.place(piece.position, piece.copy())
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._history = []

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard 32-piece starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b.place(Square(f, 0), Piece(pt, Color.WHITE, Square(f, 0)))
            b.place(Square(f, 1), Piece(PieceType.PAWN, Color.WHITE, Square(f, 1)))
            b.place(Square(f, 6), Piece(PieceType.PAWN, Color.BLACK, Square(f, 6)))
            b.place(Square(f, 7), Piece(pt, Color.BLACK, Square(f, 7)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _castle_rook_squares(move: Move) -> tuple[Square, Square]:
    """Rook origin and destination for a castling *move*."""
    f, rank = move.from_sq
    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        return Square(f + KINGSIDE_ROOK_OFFSET, rank), Square(f + 1, rank)
    return Square(f + QUEENSIDE_ROOK_OFFSET, rank), Square(f - 1, rank)
