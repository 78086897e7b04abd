# src/xyzcheck/io/xyz_writer.py

"""Serialization of Molecules back to XYZ text."""

import os
from typing import TextIO, Union

from ..domain.models.molecule import Molecule
from ..utils.validation import split_lines

ATOM_TEMPLATE = "{element} {x!r} {y!r} {z!r}\n"


def format_xyz(molecule: Molecule, comment: str = "") -> str:
    """
    Render a Molecule as XYZ text.

    Coordinates are written with repr() so parsing the output gives back
    exactly the same float values.

    Args:
        molecule: Molecule to serialize
        comment: Text for the comment line; line breaks become spaces

    Returns:
        XYZ file content ending with a newline
    """
    comment_line = " ".join(split_lines(comment))
    parts = [f"{molecule.atom_count}\n", f"{comment_line}\n"]
    for atom in molecule:
        parts.append(
            ATOM_TEMPLATE.format(
                element=atom.element, x=float(atom.x), y=float(atom.y), z=float(atom.z)
            )
        )
    return "".join(parts)


class XYZWriter:
    """Writes Molecules to XYZ files."""

    @staticmethod
    def save(
        molecule: Molecule,
        file: Union[str, os.PathLike, TextIO],
        comment: str = "",
    ) -> None:
        """Write ``molecule`` to a path or an open text handle."""
        if isinstance(file, (str, os.PathLike)):
            fhandle = open(file, "w", encoding="utf-8")
            close_file = True
        else:
            fhandle = file
            close_file = False

        try:
            fhandle.write(format_xyz(molecule, comment))
        finally:
            if close_file:
                fhandle.close()
