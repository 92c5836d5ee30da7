"""Input predicates guarding order identifiers, names and product barcodes.

All functions are total: they never raise, they answer False for anything
that does not have the expected shape.
"""

import re

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Range of the INTEGER columns that hold identifiers and product references.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

EAN13_LENGTH = 13


def is_numeric_string(value) -> bool:
    """True if `value` is an optionally signed decimal integer that fits in 64 bits.

    Stricter than `int()`: surrounding whitespace, digit separators (`1_000`)
    and non-ASCII digits are rejected.
    """
    if not isinstance(value, str) or not _SIGNED_DIGITS.fullmatch(value):
        return False
    return _INT64_MIN <= int(value) <= _INT64_MAX


def is_empty(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and len(value) == 0


def is_ean13(value) -> bool:
    """True if `value` looks like an EAN-13 barcode: exactly 13 numeric characters.

    Only the shape is checked; the trailing check digit is not verified.
    """
    return is_numeric_string(value) and len(value) == EAN13_LENGTH
