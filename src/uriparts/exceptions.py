"""
:mod:`uriparts.exceptions` defines the following exception hierarchy:

* :exc:`URIException`
    * :exc:`InvalidURI`
        * :exc:`Mismatch`
    * :exc:`CapacityExceeded`

"""

from __future__ import annotations

from typing import Optional


__all__ = [
    "URIException",
    "InvalidURI",
    "Mismatch",
    "CapacityExceeded",
]


def d(value: bytes) -> str:
    """
    Decode a bytestring for interpolating into an error message.

    """
    return value.decode(errors="backslashreplace")


class URIException(Exception):
    """
    Base class for all exceptions defined by uriparts.

    """


class InvalidURI(URIException):
    """
    Raised when the input violates the URI grammar.

    The whole input must be considered rejected: no component is usable.

    Attributes:
        uri: Input, as received.
        msg: What was wrong.
        pos: Byte offset in the input where the problem was detected, or
            :obj:`None` when it doesn't apply to a single position.

    """

    def __init__(self, uri: str | bytes, msg: str, pos: Optional[int] = None) -> None:
        if isinstance(uri, (bytes, bytearray, memoryview)):
            uri = d(bytes(uri))
        self.uri = uri
        self.msg = msg
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return f"{self.uri} isn't a valid URI: {self.msg}"
        else:
            return f"{self.uri} isn't a valid URI: {self.msg} at {self.pos}"


class Mismatch(InvalidURI):
    """
    Raised when an expected construct isn't present.

    The parser uses it to detect that an authority has no userinfo; this case
    is handled internally and never reaches the caller. It's also raised when
    a ``file`` URI doesn't start with ``file:///``.

    """


class CapacityExceeded(URIException):
    """
    Raised when a fixed-capacity :class:`~uriparts.buffer.Buffer` is full.

    Data is never truncated. Retry with a larger buffer or reject the input.

    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity

    def __str__(self) -> str:
        return f"buffer capacity of {self.capacity} bytes exceeded"
