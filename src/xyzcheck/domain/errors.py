# src/xyzcheck/domain/errors.py

"""
Exceptions raised while parsing XYZ files.

Every failure is a distinct subclass of XYZParseError so callers can tell
the kinds apart with isinstance checks or the ``kind`` attribute.
"""

from typing import Optional


class XYZParseError(ValueError):
    """Base class for all XYZ parsing failures."""

    kind = "ParseError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Set by XYZReader when the text came from a file
        self.path: Optional[str] = None

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class EmptyFileError(XYZParseError):
    """The file has no non-blank content."""

    kind = "EmptyFile"

    def __init__(self):
        super().__init__("empty file")


class InvalidAtomCountError(XYZParseError):
    """The header line is not a non-negative integer."""

    kind = "InvalidAtomCount"

    def __init__(self, text: str, reason: str = "is not a valid integer"):
        super().__init__(f"invalid atom count: '{text}' {reason}")
        self.text = text
        self.reason = reason


class MissingCommentLineError(XYZParseError):
    """The file ends after the header line."""

    kind = "MissingCommentLine"

    def __init__(self):
        super().__init__("missing comment line")


class InvalidAtomLineError(XYZParseError):
    """An atom line is blank, too short, or lacks an element label."""

    kind = "InvalidAtomLine"

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"invalid atom line at line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


class InvalidCoordinateError(XYZParseError):
    """A coordinate token is not a finite number."""

    kind = "InvalidCoordinate"

    def __init__(self, line_number: int, token: str, reason: str):
        super().__init__(f"invalid coordinate at line {line_number}: '{token}' {reason}")
        self.line_number = line_number
        self.token = token
        self.reason = reason


class AtomCountMismatchError(XYZParseError):
    """The number of atom lines differs from the declared atom count."""

    kind = "AtomCountMismatch"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"atom count mismatch: expected {expected} atoms, found {actual}"
        )
        self.expected = expected
        self.actual = actual
