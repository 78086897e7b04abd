"""Domain model classes."""

from .atom import Atom
from .molecule import Molecule

__all__ = [
    "Atom",
    "Molecule",
]
