"""Piece glyph lookup: (piece kind, color) to a drawable resource."""

from __future__ import annotations

from functools import lru_cache

from PyQt6.QtGui import QFont

from clickchess.core.enums import Color, PieceType

_GLYPHS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

PIECE_FONT_FAMILIES = ("DejaVu Sans", "Segoe UI Symbol", "Noto Sans Symbols2")


def piece_glyph(piece_type: PieceType, color: Color) -> str:
    """Unicode chess symbol, e.g. ♞."""
    return _GLYPHS[(color, piece_type)]


@lru_cache(maxsize=16)
def piece_font(pixel_size: int) -> QFont:
    """Font used to draw piece glyphs at *pixel_size*."""
    font = QFont()
    font.setFamilies(list(PIECE_FONT_FAMILIES))
    font.setPixelSize(pixel_size)
    return font
