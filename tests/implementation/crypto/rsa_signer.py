"""RSA signer implementation.

This module provides a signing key for the RS* (PKCS#1 v1.5) and PS* (PSS)
algorithms.
"""

from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from compact_jwt import Algorithm, AlgorithmFamily

_HASHES = {
    256: hashes.SHA256,
    384: hashes.SHA384,
    512: hashes.SHA512,
}


class RsaSigner:
    """RSA signing key bound to one RS or PS algorithm."""

    def __init__(self, algorithm: Algorithm, key_size: int = 2048) -> None:
        """Initialize the signing key.

        Args:
            algorithm: The RS or PS algorithm this key is bound to.
            key_size: The modulus size in bits.

        Raises:
            ValueError: If the algorithm is not an RSA algorithm.
        """
        if algorithm.family not in (AlgorithmFamily.RSA_PKCS1, AlgorithmFamily.RSA_PSS):
            raise ValueError(f"not an RSA algorithm: {algorithm}")

        self.algorithm = algorithm
        self.key_size = key_size
        self._hash = _HASHES[algorithm.digest_size]
        self._key_pair: Optional[rsa.RSAPrivateKey] = None

    def generate(self) -> None:
        """Generate a new RSA key pair."""
        self._key_pair = rsa.generate_private_key(
            public_exponent=65537, key_size=self.key_size
        )

    def sign(self, message: str) -> bytes:
        """Sign a message with the private key.

        Raises:
            ValueError: If the key pair has not been generated.
        """
        if self._key_pair is None:
            raise ValueError("keypair not generated")

        return self._key_pair.sign(message.encode("ascii"), self._padding(), self._hash())

    def verify(self, message: str, signature: bytes) -> None:
        """Verify a signature over a message.

        Raises:
            ValueError: When verification fails.
        """
        if self._key_pair is None:
            raise ValueError("keypair not generated")

        try:
            self._key_pair.public_key().verify(
                signature, message.encode("ascii"), self._padding(), self._hash()
            )
        except InvalidSignature as e:
            raise ValueError("invalid signature") from e

    def _padding(self) -> padding.AsymmetricPadding:
        if self.algorithm.family is AlgorithmFamily.RSA_PSS:
            # RFC 7518 section 3.5: salt length equals the digest length
            return padding.PSS(
                mgf=padding.MGF1(self._hash()),
                salt_length=self.algorithm.digest_size // 8,
            )
        return padding.PKCS1v15()
