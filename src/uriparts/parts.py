from __future__ import annotations

import dataclasses
import enum
from typing import FrozenSet, Optional

from .scheme import Scheme


__all__ = ["Component", "Parts"]


class Component(enum.IntEnum):
    """
    Components of a URI, in the order in which they appear.

    """

    SCHEME, USERNAME, PASSWORD, HOST, PORT, PATH, QUERY, FRAGMENT = range(8)


@dataclasses.dataclass(frozen=True)
class Parts:
    """
    Components of a parsed URI.

    Components are percent-decoded. Bytes that aren't valid UTF-8 are
    represented with surrogate escapes.

    Absent components are empty strings. Use :attr:`present` or the
    ``has_*`` properties to tell an absent component from an empty one, for
    example ``http://example.com?`` from ``http://example.com``.

    Attributes:
        scheme: Scheme, normalized to lower case.
        username: Username from `User Information`_.
        password: Password from `User Information`_.
        host: Host. For an IP literal, the brackets are removed.
        port: Port, as written.
        path: Path, including the leading ``/``.
        query: Query, without the leading ``?``.
        fragment: Fragment, without the leading ``#``.
        known_scheme: :class:`~uriparts.scheme.Scheme` matching ``scheme``.
        present: Components found in the URI.

    .. _User Information: https://www.rfc-editor.org/rfc/rfc3986.html#section-3.2.1

    """

    scheme: str = ""
    username: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    known_scheme: Scheme = Scheme.UNKNOWN
    present: FrozenSet[Component] = frozenset()

    @property
    def has_userinfo(self) -> bool:
        return Component.USERNAME in self.present

    @property
    def has_port(self) -> bool:
        return Component.PORT in self.present

    @property
    def has_query(self) -> bool:
        return Component.QUERY in self.present

    @property
    def has_fragment(self) -> bool:
        return Component.FRAGMENT in self.present

    @property
    def port_number(self) -> Optional[int]:
        """
        Port as an integer, :obj:`None` if the URI doesn't specify one.

        The parser rejects ports above 65535, so this is a valid TCP port
        when the record comes from the parser. Leading zeros are ignored.

        """
        if not self.has_port:
            return None
        return int(self.port)

    @property
    def effective_port(self) -> Optional[int]:
        """
        Port, falling back to the default port of a known scheme.

        """
        port = self.port_number
        if port is None:
            port = self.known_scheme.default_port
        return port
