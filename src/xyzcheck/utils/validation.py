# src/xyzcheck/utils/validation.py

"""Token-level validation helpers used by the XYZ reader."""

import math
import re
from typing import List

from ..domain.errors import (
    InvalidAtomCountError,
    InvalidAtomLineError,
    InvalidCoordinateError,
)

ATOM_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")
ELEMENT_PATTERN = re.compile(r"[A-Za-z0-9]+")
# Plain decimal or scientific notation, ASCII digits only
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
NON_FINITE_LITERALS = {"nan", "inf", "infinity"}
# \n, \r\n and \r only; form feeds and unicode separators stay inside a line
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split text on \\n, \\r\\n or \\r, dropping the empty piece after a final newline."""
    lines = LINE_BREAK_PATTERN.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_atom_count(text: str) -> int:
    """
    Parse the header line of an XYZ file.

    Args:
        text: Raw header line

    Returns:
        Declared number of atoms

    Raises:
        InvalidAtomCountError: If the token is not a non-negative base-10 integer
    """
    token = text.strip()
    if not ATOM_COUNT_PATTERN.fullmatch(token):
        if "." in token and FLOAT_PATTERN.fullmatch(token):
            raise InvalidAtomCountError(token, "is not an integer")
        raise InvalidAtomCountError(token)

    count = int(token)
    if count < 0:
        raise InvalidAtomCountError(token, "is negative")
    return count


def validate_element(label: str, line_number: int) -> str:
    """Check that an element label is a non-empty alphanumeric string."""
    if not ELEMENT_PATTERN.fullmatch(label):
        raise InvalidAtomLineError(
            line_number, f"element label '{label}' is not alphanumeric"
        )
    return label


def is_non_finite_literal(token: str) -> bool:
    """True for NaN/Inf spellings such as 'NaN', '-inf' or '+Infinity'."""
    return token.lstrip("+-").lower() in NON_FINITE_LITERALS


def parse_coordinate(token: str, line_number: int) -> float:
    """
    Parse a single coordinate token, rejecting NaN and infinities.

    Args:
        token: Whitespace-free coordinate token
        line_number: 1-based line number for error reporting

    Returns:
        Finite float value

    Raises:
        InvalidCoordinateError: If the token is not a finite decimal number
    """
    if is_non_finite_literal(token):
        raise InvalidCoordinateError(
            line_number, token, "is not a valid coordinate (NaN/Inf not allowed)"
        )
    if not FLOAT_PATTERN.fullmatch(token):
        raise InvalidCoordinateError(line_number, token, "is not a valid number")

    value = float(token)
    # Overflowing literals such as 1e999 parse to inf
    if not math.isfinite(value):
        raise InvalidCoordinateError(line_number, token, "is not a finite number")
    return value
