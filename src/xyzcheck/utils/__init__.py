from .validation import (
    split_lines,
    parse_atom_count,
    validate_element,
    parse_coordinate,
    is_non_finite_literal,
)

__all__ = [
    "split_lines",
    "parse_atom_count",
    "validate_element",
    "parse_coordinate",
    "is_non_finite_literal",
]
