from __future__ import annotations

import enum
from typing import Optional, Tuple


__all__ = [
    "Scheme",
    "string_to_scheme",
    "normalize_scheme",
]


class Scheme(enum.Enum):
    """
    Known URI schemes.

    Any other scheme is :attr:`UNKNOWN`, which isn't an error.

    """

    UNKNOWN = ""
    FTP = "ftp"
    FILE = "file"
    GOPHER = "gopher"
    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"

    @property
    def is_special(self) -> bool:
        """
        Tell whether the scheme is special in the sense of the URL Standard.

        All known schemes are special.

        """
        return self is not Scheme.UNKNOWN

    @property
    def default_port(self) -> Optional[int]:
        """
        Port used when a URI with this scheme doesn't specify one.

        """
        return DEFAULT_PORTS.get(self)


DEFAULT_PORTS = {
    Scheme.FTP: 21,
    Scheme.GOPHER: 70,
    Scheme.HTTP: 80,
    Scheme.HTTPS: 443,
    Scheme.WS: 80,
    Scheme.WSS: 443,
}


def string_to_scheme(scheme: str) -> Scheme:
    """
    Return the known scheme for a scheme name, which may not be normalized.

    """
    try:
        return Scheme(scheme.translate(_ASCII_LOWER))
    except ValueError:
        return Scheme.UNKNOWN


def normalize_scheme(scheme: str) -> Tuple[str, Scheme]:
    """
    Normalize a scheme name.

    Return the name converted to lower case and the matching known scheme,
    :attr:`Scheme.UNKNOWN` if there's none.

    Only ASCII letters are converted: scheme names are ASCII.

    """
    lowered = scheme.translate(_ASCII_LOWER)
    return lowered, string_to_scheme(lowered)


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)
