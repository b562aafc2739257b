"""Compact serialization codec for signed JSON Web Tokens.

This package builds and parses the ``header.payload.signature`` compact form
of a JWS and validates untrusted headers. Signing and verification are left
to the caller; the codec only decides whether a token is well-formed and
whether its header asserts the algorithm the caller expects.

Main Components:
    - Algorithm: The closed allow-list of signing algorithms
    - create_unsigned_compact / create_signed_compact: Token assembly
    - split_signed_compact: Token disassembly
    - validate_header: Algorithm binding and header field checks
    - Exceptions: AlgorithmError for configuration faults, FormatError for
      malformed tokens

Example:
    >>> from compact_jwt import Algorithm, create_unsigned_compact
    >>> create_unsigned_compact(Algorithm.HS256, "{}")
    'eyJhbGciOiJIUzI1NiJ9.e30'
"""

from compact_jwt.algorithms import Algorithm, AlgorithmFamily, validate_algorithm
from compact_jwt.encoding import Base64Url
from compact_jwt.exceptions import (
    AlgorithmError,
    AlgorithmMismatchError,
    Base64UrlError,
    CompactJwtError,
    FormatError,
    InvalidHeaderError,
    InvalidHeaderTypeError,
    InvalidPayloadError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingAlgorithmError,
    NonAsciiError,
    UnexpectedHeaderError,
)
from compact_jwt.format import (
    CompactParts,
    JsonObject,
    create_header,
    create_signed_compact,
    create_unsigned_compact,
    decode_header,
    decode_payload,
    decode_signature,
    encode_payload,
    encode_signature,
    split_signed_compact,
    validate_ascii,
    validate_header,
)

__version__ = "0.1.0"

__all__ = [
    # Algorithms
    "Algorithm",
    "AlgorithmFamily",
    "validate_algorithm",
    # Encoding
    "Base64Url",
    # Format
    "CompactParts",
    "JsonObject",
    "create_header",
    "validate_header",
    "decode_header",
    "encode_payload",
    "decode_payload",
    "encode_signature",
    "decode_signature",
    "create_unsigned_compact",
    "create_signed_compact",
    "split_signed_compact",
    "validate_ascii",
    # Exceptions
    "CompactJwtError",
    "AlgorithmError",
    "FormatError",
    "Base64UrlError",
    "NonAsciiError",
    "MalformedTokenError",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "InvalidHeaderError",
    "MissingAlgorithmError",
    "AlgorithmMismatchError",
    "InvalidHeaderTypeError",
    "UnexpectedHeaderError",
]
