"""Piece record: kind tag, color, position and kind-specific flags."""

from __future__ import annotations

from dataclasses import dataclass, replace

from clickchess.core.enums import Color, PieceType
from clickchess.core.types import Square

# Letter ↔ (Color, PieceType), uppercase = white
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_CASTLING_KINDS = frozenset((PieceType.ROOK, PieceType.KING))


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``piece_type`` and ``color`` never change.  ``position`` is kept in sync
    by :class:`~clickchess.core.board.Board`.  ``castling_right`` is only
    meaningful for rooks and kings, ``just_double_stepped`` only for pawns;
    for every other kind they are forced to ``False``.
    """

    piece_type: PieceType
    color: Color
    position: Square
    castling_right: bool = True
    just_double_stepped: bool = False

    def __post_init__(self) -> None:
        if self.piece_type not in _CASTLING_KINDS:
            self.castling_right = False
        if self.piece_type != PieceType.PAWN:
            self.just_double_stepped = False

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_rook(self) -> bool:
        return self.piece_type == PieceType.ROOK

    def copy(self) -> Piece:
        return replace(self)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Square) -> Piece:
        """Create piece from its letter, e.g. ``'N'`` -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color, position)
