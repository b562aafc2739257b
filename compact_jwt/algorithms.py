"""Signing algorithm allow-list.

This module defines the closed set of algorithm identifiers the codec accepts
and the single function that turns an untrusted value into an ``Algorithm``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from compact_jwt.exceptions import AlgorithmError


class AlgorithmFamily(str, Enum):
    """Signature scheme family of an algorithm."""

    HMAC = "HMAC"
    ECDSA = "ECDSA"
    RSA_PKCS1 = "RSA-PKCS1"
    RSA_PSS = "RSA-PSS"


class Algorithm(str, Enum):
    """JWS algorithm identifiers accepted by the codec.

    Members are ``str`` instances equal to their identifier, so they can be
    written into a header directly.
    """

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> AlgorithmFamily:
        """The signature scheme family, taken from the identifier prefix."""
        return _FAMILIES[self.value[:2]]

    @property
    def digest_size(self) -> int:
        """The digest strength in bits (256, 384 or 512)."""
        return int(self.value[2:])


_FAMILIES: Dict[str, AlgorithmFamily] = {
    "HS": AlgorithmFamily.HMAC,
    "ES": AlgorithmFamily.ECDSA,
    "RS": AlgorithmFamily.RSA_PKCS1,
    "PS": AlgorithmFamily.RSA_PSS,
}

_BY_NAME: Dict[str, Algorithm] = {member.value: member for member in Algorithm}


def validate_algorithm(name: Any) -> Algorithm:
    """Return the ``Algorithm`` for an exact identifier match.

    Comparison is ordinal: case variants, the empty string, ``none`` and any
    non-string value are rejected.

    Args:
        name: The algorithm identifier to check.

    Returns:
        The matching ``Algorithm`` member.

    Raises:
        AlgorithmError: If ``name`` is not in the allow-list.
    """
    if isinstance(name, Algorithm):
        return name
    if not isinstance(name, str):
        raise AlgorithmError(name)

    algorithm = _BY_NAME.get(name)
    if algorithm is None:
        raise AlgorithmError(name)

    return algorithm
