"""Compact serialization format for signed tokens.

This module builds and parses the ``header.payload.signature`` string of a
JWS compact serialization and validates the header against the algorithm the
caller's key is bound to. It never signs or verifies; the unsigned compact is
handed to an external signer, and the split parts to an external verifier.

Build path::

    unsigned = create_unsigned_compact(Algorithm.HS256, payload_json)
    token = create_signed_compact(unsigned, signer.sign(unsigned))

Parse path::

    parts = split_signed_compact(token)
    validate_header(Algorithm.HS256, parts.header)
    verifier.verify(parts.unsigned_compact, parts.signature)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, NoReturn, Tuple

from compact_jwt.algorithms import Algorithm, validate_algorithm
from compact_jwt.encoding import Base64Url
from compact_jwt.exceptions import (
    AlgorithmMismatchError,
    Base64UrlError,
    InvalidHeaderError,
    InvalidHeaderTypeError,
    InvalidPayloadError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingAlgorithmError,
    NonAsciiError,
    UnexpectedHeaderError,
)
from compact_jwt.names import (
    HEADER_ALGORITHM,
    HEADER_NAMES,
    HEADER_TYPE,
    HEADER_TYPE_VALUE,
)

logger = logging.getLogger(__name__)

JsonObject = Dict[str, Any]


@dataclass(frozen=True)
class CompactParts:
    """The decoded segments of a signed compact token.

    Attributes:
        unsigned_compact: The ``header.payload`` prefix the signature covers.
        header: The decoded header. It has not been validated.
        payload: The decoded payload JSON string.
        signature: The raw signature bytes.
    """

    unsigned_compact: str
    header: JsonObject
    payload: str
    signature: bytes


def create_header(algorithm: Algorithm | str) -> str:
    """Create the encoded header for an algorithm.

    Args:
        algorithm: The signing algorithm.

    Returns:
        The base64url encoding of ``{"alg":"<algorithm>"}``.

    Raises:
        AlgorithmError: If the algorithm is not in the allow-list.
    """
    validated = validate_algorithm(algorithm)
    header = {HEADER_ALGORITHM: validated.value}
    return Base64Url.encode(_dump_json(header).encode("utf-8"))


def validate_header(expected_algorithm: Algorithm | str, header: Mapping[str, Any]) -> None:
    """Validate an untrusted header against the expected algorithm.

    The header must carry ``alg`` equal to ``expected_algorithm`` (exact,
    case-sensitive), may carry ``typ`` equal to ``JWT`` in any case, and must
    carry nothing else.

    Args:
        expected_algorithm: The algorithm the verifying key is bound to.
        header: The decoded header.

    Raises:
        AlgorithmError: If ``expected_algorithm`` is not in the allow-list.
        MissingAlgorithmError: If the header has no ``alg``.
        AlgorithmMismatchError: If ``alg`` differs from the expected one.
        InvalidHeaderTypeError: If ``typ`` is present and not ``JWT``.
        UnexpectedHeaderError: If the header has any other field.
        InvalidHeaderError: If the header or a field has the wrong JSON type.
    """
    expected = validate_algorithm(expected_algorithm)

    if not isinstance(header, Mapping):
        _reject(InvalidHeaderError("invalid JWT header: not a JSON object"))

    if HEADER_ALGORITHM not in header:
        _reject(MissingAlgorithmError())

    extra = sorted(set(header) - HEADER_NAMES, key=str)
    if extra:
        _reject(UnexpectedHeaderError(extra[0]))

    algorithm = _get_string_header(header, HEADER_ALGORITHM)
    if algorithm != expected.value:
        _reject(AlgorithmMismatchError(expected.value, algorithm))

    if HEADER_TYPE in header:
        header_type = _get_string_header(header, HEADER_TYPE)
        if header_type.upper() != HEADER_TYPE_VALUE:
            _reject(
                InvalidHeaderTypeError(
                    f"invalid header type; expected {HEADER_TYPE_VALUE}, "
                    f"got {header_type!r}"
                )
            )


def decode_header(encoded: str) -> JsonObject:
    """Decode a header segment into a JSON object.

    Args:
        encoded: The base64url header segment.

    Returns:
        The parsed header object.

    Raises:
        InvalidHeaderError: If the segment is not base64url, not UTF-8, not
            strict JSON, or not a JSON object.
    """
    try:
        text = Base64Url.decode(encoded).decode("utf-8")
        header = _load_json(text)
    except (Base64UrlError, UnicodeDecodeError, ValueError, RecursionError) as e:
        _reject(InvalidHeaderError(f"invalid JWT header: {e}"), e)

    if not isinstance(header, dict):
        _reject(InvalidHeaderError("invalid JWT header: not a JSON object"))

    return header


def encode_payload(json_payload: str) -> str:
    """Encode a serialized JSON payload. The JSON itself is not checked."""
    return Base64Url.encode(json_payload.encode("utf-8"))


def decode_payload(encoded: str) -> str:
    """Decode a payload segment into its JSON string.

    Raises:
        InvalidPayloadError: If the segment is not base64url or not UTF-8.
    """
    try:
        return Base64Url.decode(encoded).decode("utf-8")
    except (Base64UrlError, UnicodeDecodeError) as e:
        _reject(InvalidPayloadError(f"invalid JWT payload: {e}"), e)


def encode_signature(signature: bytes) -> str:
    """Encode raw signature bytes."""
    return Base64Url.encode(signature)


def decode_signature(encoded: str) -> bytes:
    """Decode a signature segment into raw bytes.

    Raises:
        InvalidSignatureError: If the segment is not base64url.
    """
    try:
        return Base64Url.decode(encoded)
    except Base64UrlError as e:
        _reject(InvalidSignatureError(f"invalid JWT signature: {e}"), e)


def create_unsigned_compact(algorithm: Algorithm | str, json_payload: str) -> str:
    """Create the ``header.payload`` string that gets signed.

    Raises:
        AlgorithmError: If the algorithm is not in the allow-list.
    """
    return create_header(algorithm) + "." + encode_payload(json_payload)


def create_signed_compact(unsigned_compact: str, signature: bytes) -> str:
    """Append the encoded signature to an unsigned compact."""
    return unsigned_compact + "." + encode_signature(signature)


def split_signed_compact(signed_compact: str) -> CompactParts:
    """Split a signed compact token and decode its segments.

    The header is decoded but not validated; call ``validate_header`` with
    the algorithm bound to the verifying key before trusting it.

    Args:
        signed_compact: The ``header.payload.signature`` string.

    Returns:
        The decoded parts.

    Raises:
        NonAsciiError: If the token contains a non-ASCII character.
        MalformedTokenError: If the token does not have three segments.
        InvalidHeaderError: If the header segment cannot be decoded.
        InvalidPayloadError: If the payload segment cannot be decoded.
        InvalidSignatureError: If the signature segment cannot be decoded.
    """
    validate_ascii(signed_compact)

    segments = signed_compact.split(".")
    if len(segments) != 3:
        _reject(
            MalformedTokenError(
                f"invalid JWT: expected 3 segments, got {len(segments)}"
            )
        )

    header_segment, payload_segment, signature_segment = segments
    return CompactParts(
        unsigned_compact=header_segment + "." + payload_segment,
        header=decode_header(header_segment),
        payload=decode_payload(payload_segment),
        signature=decode_signature(signature_segment),
    )


def validate_ascii(text: str) -> None:
    """Check that every character of ``text`` is 7-bit ASCII.

    Raises:
        NonAsciiError: On the first character at or above 0x80.
    """
    if not text.isascii():
        _reject(NonAsciiError("non-ASCII character"))


def _get_string_header(header: Mapping[str, Any], name: str) -> str:
    value = header[name]
    if not isinstance(value, str):
        _reject(InvalidHeaderError(f"header {name} is not a string"))
    return value


def _dump_json(value: JsonObject) -> str:
    return json.dumps(value, separators=(",", ":"))


def _load_json(text: str) -> Any:
    return json.loads(
        text,
        object_pairs_hook=_unique_members,
        parse_constant=_reject_constant,
    )


def _unique_members(pairs: List[Tuple[str, Any]]) -> JsonObject:
    obj: JsonObject = {}
    for name, value in pairs:
        if name in obj:
            raise ValueError(f"duplicate member {name!r}")
        obj[name] = value
    return obj


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"invalid constant {name}")


def _reject(error: Exception, cause: BaseException | None = None) -> NoReturn:
    logger.debug("rejected token: %s", error)
    raise error from cause
