"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Position

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    start: Position
    end: Position
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and self.promotion not in PROMOTION_TYPES:
            raise ValueError(f"Invalid promotion piece: {self.promotion.name}")

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    def __repr__(self) -> str:
        base = f"Move({self.start!r} -> {self.end!r}"
        if self.promotion is not None:
            base += f", {self.promotion.name}"
        return base + ")"
