from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union


__all__ = [
    "URILike",
    "LoggerLike",
]


# Public types used in the signature of public APIs

URILike = Union[str, bytes, bytearray, memoryview]
"""Types accepted where a URI is expected.

:class:`str` is encoded to UTF-8 before parsing, so non-ASCII characters are
rejected like any other byte outside the URI grammar.

"""

if TYPE_CHECKING:
    LoggerLike = Union[logging.Logger, "logging.LoggerAdapter[Any]"]
    """Types accepted where a :class:`~logging.Logger` is expected."""
else:  # remove this branch when dropping support for Python < 3.11
    LoggerLike = Union[logging.Logger, logging.LoggerAdapter]
    """Types accepted where a :class:`~logging.Logger` is expected."""
