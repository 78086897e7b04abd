"""Reading and writing of XYZ files."""

from .xyz_reader import XYZReader, parse_xyz, parse_atom_line
from .xyz_writer import XYZWriter, format_xyz

__all__ = [
    "XYZReader",
    "XYZWriter",
    "parse_xyz",
    "parse_atom_line",
    "format_xyz",
]
