"""Registered names used in JWT headers."""

HEADER_ALGORITHM = "alg"
HEADER_TYPE = "typ"

# Compared against the upper-cased ``typ`` value.
HEADER_TYPE_VALUE = "JWT"

HEADER_NAMES = frozenset({HEADER_ALGORITHM, HEADER_TYPE})
