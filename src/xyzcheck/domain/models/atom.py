#!/usr/bin/env python3
# src/xyzcheck/domain/models/atom.py

"""
Domain model representing an atom in an XYZ geometry.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents a single atom: an element label and its cartesian position."""

    element: str
    x: float
    y: float
    z: float

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        """Position as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)
