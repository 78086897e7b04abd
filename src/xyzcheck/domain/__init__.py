"""Domain models and error taxonomy for XYZ geometries."""

from .models import Atom, Molecule
from .errors import (
    XYZParseError,
    EmptyFileError,
    InvalidAtomCountError,
    MissingCommentLineError,
    InvalidAtomLineError,
    InvalidCoordinateError,
    AtomCountMismatchError,
)

__all__ = [
    "Atom",
    "Molecule",
    "XYZParseError",
    "EmptyFileError",
    "InvalidAtomCountError",
    "MissingCommentLineError",
    "InvalidAtomLineError",
    "InvalidCoordinateError",
    "AtomCountMismatchError",
]
