"""
Character classes and percent-decoding from :rfc:`3986`.

Each predicate takes one byte, as an :class:`int`, and tells whether it's
legal in a production. They're defined for any integer: bytes outside ASCII,
control characters, space, CR and LF are never legal.

The percent sign isn't part of any class. ``pct-encoded`` is handled by
:func:`decode_percent` instead.

"""

from __future__ import annotations

from typing import Tuple

from .exceptions import InvalidURI


__all__ = [
    "is_alpha",
    "is_digit",
    "is_hex",
    "is_unreserved",
    "is_sub_delims",
    "is_gen_delims",
    "is_pchar",
    "is_qchar",
    "is_uchar",
    "is_hsegment",
    "decode_percent",
]


# See https://www.rfc-editor.org/rfc/rfc3986.html#appendix-A
# and https://www.rfc-editor.org/rfc/rfc1738.html#section-5 for uchar and
# hsegment, which come from the HTTP URL scheme of RFC 1738.

# ALPHA = %x41-5A / %x61-7A
_ALPHA = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# DIGIT = %x30-39
_DIGIT = frozenset(b"0123456789")

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F", case-insensitive
_HEXDIG = _DIGIT | frozenset(b"ABCDEFabcdef")

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED = _ALPHA | _DIGIT | frozenset(b"-._~")

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS = frozenset(b"!$&'()*+,;=")

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
_GEN_DELIMS = frozenset(b":/?#[]@")

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR = _UNRESERVED | _SUB_DELIMS | frozenset(b":@")

# query = fragment = *( pchar / "/" / "?" )
_QCHAR = _PCHAR | frozenset(b"/?")

# uchar = unreserved / escape / ";" / "?" / "&" / "="
_UCHAR = _UNRESERVED | frozenset(b";?&=")

# hsegment = *[ uchar | ";" | ":" | "@" | "&" | "=" ]
_HSEGMENT = _UCHAR | frozenset(b":@")


def is_alpha(c: int) -> bool:
    return c in _ALPHA


def is_digit(c: int) -> bool:
    return c in _DIGIT


def is_hex(c: int) -> bool:
    return c in _HEXDIG


def is_unreserved(c: int) -> bool:
    return c in _UNRESERVED


def is_sub_delims(c: int) -> bool:
    return c in _SUB_DELIMS


def is_gen_delims(c: int) -> bool:
    return c in _GEN_DELIMS


def is_pchar(c: int) -> bool:
    return c in _PCHAR


def is_qchar(c: int) -> bool:
    return c in _QCHAR


def is_uchar(c: int) -> bool:
    return c in _UCHAR


def is_hsegment(c: int) -> bool:
    return c in _HSEGMENT


def decode_percent(data: bytes, pos: int) -> Tuple[int, int]:
    """
    Decode a ``pct-encoded`` triplet from ``data`` at the given position.

    ``data[pos]`` must be ``%``.

    Return the decoded byte and the new position, which is ``pos + 3``.

    The decoded byte is data. Callers must not interpret it as a delimiter.

    Raise :exc:`~uriparts.exceptions.InvalidURI` if two hexadecimal digits
    don't follow.

    """
    assert data[pos] == 0x25  # %
    if len(data) - pos < 3:
        raise InvalidURI(data, "truncated percent-encoding", pos)
    hi, lo = data[pos + 1], data[pos + 2]
    if not is_hex(hi) or not is_hex(lo):
        raise InvalidURI(data, "invalid percent-encoding", pos)
    return int(data[pos + 1 : pos + 3], 16), pos + 3
