#!/usr/bin/env python3
# src/xyzcheck/io/xyz_reader.py

"""
Parser for single-frame XYZ geometry files.

Errors are classified in a fixed priority order and the first applicable
one is raised:

    empty file -> invalid atom count -> missing comment line
    -> invalid atom line -> invalid coordinate -> atom count mismatch
"""

import logging
from typing import List

from ..domain.errors import (
    XYZParseError,
    EmptyFileError,
    MissingCommentLineError,
    InvalidAtomLineError,
    AtomCountMismatchError,
)
from ..domain.models.atom import Atom
from ..domain.models.molecule import Molecule
from ..utils.validation import (
    split_lines,
    parse_atom_count,
    validate_element,
    parse_coordinate,
)

logger = logging.getLogger(__name__)

# Header and comment precede the atom block
ATOM_LINE_OFFSET = 2


def parse_atom_line(line: str, line_number: int) -> Atom:
    """
    Parse one atom record.

    Args:
        line: Raw atom line
        line_number: 1-based line number in the file

    Returns:
        Atom built from the label and the first three coordinates

    Raises:
        InvalidAtomLineError: If the line is blank, short, or badly labelled
        InvalidCoordinateError: If any of x, y, z is not a finite number
    """
    fields = line.split()
    if not fields:
        raise InvalidAtomLineError(line_number, "empty line in atom section")
    if len(fields) < 4:
        raise InvalidAtomLineError(
            line_number, f"expected at least 4 fields, found {len(fields)}"
        )

    element = validate_element(fields[0], line_number)
    x, y, z = (parse_coordinate(token, line_number) for token in fields[1:4])
    # Anything after the z coordinate is ignored
    return Atom(element=element, x=x, y=y, z=z)


def parse_xyz(text: str) -> Molecule:
    """
    Parse XYZ text into a Molecule.

    Args:
        text: Full file content

    Returns:
        Molecule holding the atoms in file order

    Raises:
        XYZParseError: One of its subclasses, describing the first problem found
    """
    if not text.strip():
        raise EmptyFileError()

    lines: List[str] = split_lines(text)
    atom_count = parse_atom_count(lines[0])
    logger.debug(f"Header declares {atom_count} atoms")

    if len(lines) < ATOM_LINE_OFFSET:
        raise MissingCommentLineError()

    atom_lines = lines[ATOM_LINE_OFFSET:]
    atoms = []
    for i in range(atom_count):
        if i >= len(atom_lines):
            raise AtomCountMismatchError(expected=atom_count, actual=i)
        atoms.append(parse_atom_line(atom_lines[i], i + ATOM_LINE_OFFSET + 1))

    extra_lines = sum(1 for line in atom_lines[atom_count:] if line.strip())
    if extra_lines:
        raise AtomCountMismatchError(
            expected=atom_count, actual=atom_count + extra_lines
        )

    logger.debug(f"Parsed {len(atoms)} atoms")
    return Molecule(tuple(atoms))


class XYZReader:
    """Handles reading of XYZ files from disk."""

    @staticmethod
    def read(filepath: str, encoding: str = "utf-8") -> Molecule:
        """
        Read and parse an XYZ file.

        Args:
            filepath: Path to the XYZ file
            encoding: Text encoding of the file

        Returns:
            Parsed Molecule

        Raises:
            XYZParseError: If the content is malformed; ``path`` is set on the error
            OSError: If the file cannot be read
        """
        with open(filepath, "r", encoding=encoding) as f:
            content = f.read()

        try:
            molecule = parse_xyz(content)
        except XYZParseError as e:
            e.path = str(filepath)
            raise

        logger.info(f"Loaded {molecule.atom_count} atoms from {filepath}")
        return molecule
