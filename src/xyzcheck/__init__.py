"""Parsing and validation of XYZ molecular geometry files."""

from .domain.models import Atom, Molecule
from .domain.errors import (
    XYZParseError,
    EmptyFileError,
    InvalidAtomCountError,
    MissingCommentLineError,
    InvalidAtomLineError,
    InvalidCoordinateError,
    AtomCountMismatchError,
)
from .io.xyz_reader import XYZReader, parse_xyz
from .io.xyz_writer import XYZWriter, format_xyz

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Molecule",
    "parse_xyz",
    "format_xyz",
    "XYZReader",
    "XYZWriter",
    "XYZParseError",
    "EmptyFileError",
    "InvalidAtomCountError",
    "MissingCommentLineError",
    "InvalidAtomLineError",
    "InvalidCoordinateError",
    "AtomCountMismatchError",
]
