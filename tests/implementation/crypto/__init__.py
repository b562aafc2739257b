"""Crypto reference implementation package.

This package provides reference signers that produce real JWS signatures
over unsigned compacts for the test suite.
"""

from typing import Union

from compact_jwt import Algorithm, AlgorithmFamily

from .ecdsa_signer import EcdsaSigner
from .hmac_signer import HmacSigner
from .rsa_signer import RsaSigner

Signer = Union[EcdsaSigner, HmacSigner, RsaSigner]


def signer_for(algorithm: Algorithm) -> Signer:
    """Create and generate a signing key for an algorithm.

    Args:
        algorithm: The algorithm the key is bound to.

    Returns:
        A signer with a freshly generated key.
    """
    signer: Signer
    if algorithm.family is AlgorithmFamily.HMAC:
        signer = HmacSigner(algorithm)
    elif algorithm.family is AlgorithmFamily.ECDSA:
        signer = EcdsaSigner(algorithm)
    else:
        signer = RsaSigner(algorithm)

    signer.generate()
    return signer


__all__ = [
    "EcdsaSigner",
    "HmacSigner",
    "RsaSigner",
    "Signer",
    "signer_for",
]
