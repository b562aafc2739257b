"""Exception classes for compact-jwt.

This module defines the exception types raised by the compact format codec.
Two fault domains are kept apart: ``AlgorithmError`` signals a caller
configuration fault, ``FormatError`` and its subclasses signal an untrusted
token that must be rejected.
"""

from __future__ import annotations

from typing import Any


class CompactJwtError(Exception):
    """Base exception class for all compact-jwt errors."""

    pass


class AlgorithmError(CompactJwtError):
    """Exception raised when an algorithm is outside the allow-list.

    Attributes:
        algorithm: The rejected algorithm value.
    """

    def __init__(self, algorithm: Any) -> None:
        super().__init__(f"invalid algorithm: {algorithm!r}")
        self.algorithm = algorithm


class FormatError(CompactJwtError):
    """Exception raised when a token or one of its segments is malformed."""

    pass


class Base64UrlError(FormatError):
    """Exception raised for input that is not unpadded base64url."""

    pass


class NonAsciiError(FormatError):
    """Exception raised when text contains a non-ASCII character."""

    pass


class MalformedTokenError(FormatError):
    """Exception raised when a compact token has the wrong number of segments."""

    pass


class InvalidPayloadError(FormatError):
    """Exception raised when the payload segment cannot be decoded."""

    pass


class InvalidSignatureError(FormatError):
    """Exception raised when the signature segment cannot be decoded."""

    pass


class InvalidHeaderError(FormatError):
    """Exception raised when a header is malformed or fails validation."""

    pass


class MissingAlgorithmError(InvalidHeaderError):
    """Exception raised when a header has no ``alg`` field."""

    def __init__(self) -> None:
        super().__init__("missing algorithm in header")


class AlgorithmMismatchError(InvalidHeaderError):
    """Exception raised when the header ``alg`` differs from the expected one.

    Attributes:
        expected: The algorithm the caller's key is bound to.
        actual: The algorithm asserted by the token.
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f"invalid algorithm; expected {expected}, got {actual!r}"
        )
        self.expected = expected
        self.actual = actual


class InvalidHeaderTypeError(InvalidHeaderError):
    """Exception raised when the header ``typ`` is not the JWT type marker."""

    pass


class UnexpectedHeaderError(InvalidHeaderError):
    """Exception raised when a header carries an unrecognized field.

    Attributes:
        name: The unrecognized field name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid JWT header: unexpected header {name!r}")
        self.name = name
