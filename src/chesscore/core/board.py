"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.types import Square, make_square
from chesscore.errors import CorruptStateError

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


class Board:
    """Mutable 64-square board. A plain container: no legality checks."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Mutation -----------------------------------------------------------

    def place(self, sq: Square, piece: Piece) -> None:
        self._squares[sq] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq*, returning whatever stood there."""
        piece = self._squares[sq]
        self._squares[sq] = None
        return piece

    def move(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq*; return the piece it displaced."""
        piece = self._squares[from_sq]
        if piece is None:
            raise CorruptStateError(f"No piece on square {from_sq}")
        displaced = self._squares[to_sq]
        self._squares[to_sq] = piece
        self._squares[from_sq] = None
        return displaced

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs in square order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def all_pieces_of(self, color: Color) -> list[tuple[Square, Piece]]:
        """Every square occupied by *color* together with its piece."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, p in self.occupied() if p == target]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.pieces(color, piece_type))

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise CorruptStateError(
                f"Expected one {color.name} king on board, found {len(kings)}"
            )
        return kings[0]

    # -- Copying / factory ---------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place(make_square(f, 1), Piece(Color.WHITE, PieceType.PAWN))
            b.place(make_square(f, 6), Piece(Color.BLACK, PieceType.PAWN))
        for f, pt in enumerate(_BACK_RANK):
            b.place(make_square(f, 0), Piece(Color.WHITE, pt))
            b.place(make_square(f, 7), Piece(Color.BLACK, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
