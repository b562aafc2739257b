"""Base64url encoding utilities.

This module provides the unpadded, URL-safe base64 transcoding used for every
segment of a compact token (RFC 4648 Section 5).
"""

from __future__ import annotations

import base64
import binascii
import re

from compact_jwt.exceptions import Base64UrlError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class Base64Url:
    """Base64url encoding utilities without padding.

    Encoding strips the trailing ``=`` characters. Decoding is strict: it
    accepts only characters from the URL-safe alphabet, rejects padding and
    rejects lengths that no byte string encodes to.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to an unpadded base64url string.

        Args:
            data: The bytes to encode.

        Returns:
            The base64url encoded string, without ``=`` padding.
        """
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

    @staticmethod
    def decode(encoded: str) -> bytes:
        """Decode an unpadded base64url string to bytes.

        Args:
            encoded: The base64url string to decode.

        Returns:
            The decoded bytes.

        Raises:
            Base64UrlError: If the input contains characters outside the
                URL-safe alphabet, carries padding, or has an impossible
                length.
        """
        if not isinstance(encoded, str) or _ALPHABET.fullmatch(encoded) is None:
            raise Base64UrlError("invalid base64url character")
        if len(encoded) % 4 == 1:
            raise Base64UrlError("invalid base64url length")

        # Restore padding (base64 strings must have length divisible by 4)
        padded = encoded + "=" * (-len(encoded) % 4)
        try:
            return base64.urlsafe_b64decode(padded)
        except binascii.Error as e:
            raise Base64UrlError(f"invalid base64url input: {e}") from e
