"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import Color, PieceType
from chesscore.errors import InvalidNotationError

# FEN character ↔ (Color, PieceType)
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

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_TYPE_NAMES: dict[str, PieceType] = {
    **{pt.name.lower(): pt for pt in PieceType},
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidNotationError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def is_a(self, piece_type: PieceType) -> bool:
        return self.piece_type == piece_type


def parse_piece_type(value: PieceType | str) -> PieceType:
    """Accept a :class:`PieceType` or a name such as ``"queen"`` / ``"Q"``."""
    if isinstance(value, PieceType):
        return value
    try:
        return _TYPE_NAMES[str(value).strip().lower()]
    except KeyError:
        raise InvalidNotationError(f"Invalid piece type: {value!r}") from None
