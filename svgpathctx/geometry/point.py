"""Immutable 2D point. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in output coordinate space.

    Frozen, so a Point stored in command or shape history can never be
    altered through a reference the caller still holds.
    """

    x: float
    y: float

    def copy(self) -> Point:
        return Point(self.x, self.y)

    def as_complex(self) -> complex:
        """svgpathtools represents points as complex numbers."""
        return complex(self.x, self.y)

    @classmethod
    def from_complex(cls, z: complex) -> Point:
        return cls(float(z.real), float(z.imag))

    def __iter__(self):
        yield self.x
        yield self.y
