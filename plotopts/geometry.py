"""Affine coordinates, colours and tolerant float comparison."""

from __future__ import annotations

from dataclasses import dataclass

EPSILON = 1e-3


def is_close(x: float, y: float, epsilon: float = EPSILON) -> bool:
    """Whether two numbers differ by less than ``epsilon``."""
    return abs(x - y) < epsilon


@dataclass(frozen=True)
class AffineCoordinate:
    """A coordinate of the form ``scale * side + offset`` (offset in inches)."""

    scale: float
    offset: float

    def __str__(self) -> str:
        return f"{self.scale:g}s + {self.offset:g}"


@dataclass(frozen=True)
class AffinePoint:
    """A point whose two coordinates are independent affine coordinates."""

    x: AffineCoordinate
    y: AffineCoordinate

    @classmethod
    def top_left(cls) -> AffinePoint:
        return cls(AffineCoordinate(0.0, 0.0), AffineCoordinate(0.0, 0.0))

    @classmethod
    def bottom_right(cls) -> AffinePoint:
        return cls(AffineCoordinate(1.0, 0.0), AffineCoordinate(1.0, 0.0))

    def __str__(self) -> str:
        return f"AffinePoint(x: {self.x}, y: {self.y})"


@dataclass(frozen=True)
class Color:
    """A 32-bit colour packed as ABGR; stored as an unsigned value."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & 0xFFFFFFFF)

    @property
    def alpha(self) -> int:
        return self.value >> 24

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 0xFF

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0x00

    @classmethod
    def black(cls) -> Color:
        return cls(0xFF000000)

    @classmethod
    def white(cls) -> Color:
        return cls(0xFFFFFFFF)

    def __str__(self) -> str:
        return f"#{self.value:08x}"