"""Result types shared by curve implementations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurveAmounts:
    """Amounts of asset X and asset Y moved by a deposit or withdraw."""

    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y
