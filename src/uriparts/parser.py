"""
Parse URIs into their components with a single-pass state machine.

The grammar is a strict subset of :rfc:`3986`, as used in HTTP request
targets (:rfc:`7230#section-5.3`)::

    scheme ":" "//" [ username [ ":" password ] "@" ] host [ ":" port ]
        [ path ] [ "?" query ] [ "#" fragment ]

Every byte is checked against the character class of the component being
parsed. A byte outside that class aborts parsing: nothing is copied blindly,
so control characters, spaces and non-ASCII bytes can't be smuggled into a
component. Inputs that more than one parser could read differently, such as
a second ``@`` or a second port, are rejected.

Host validation is loose on purpose. Any reg-name is accepted as a host,
even one that looks like an invalid IPv4 address, and IP literals are only
checked to contain hexadecimal digits and colons. Callers that need a valid
IP address must check it themselves.

"""

from __future__ import annotations

import enum
import logging
import re
from typing import Callable, Optional

from .buffer import Buffer
from .exceptions import CapacityExceeded, InvalidURI, Mismatch
from .parts import Component, Parts
from .rfc3986 import (
    decode_percent,
    is_alpha,
    is_digit,
    is_hex,
    is_hsegment,
    is_sub_delims,
    is_uchar,
    is_unreserved,
)
from .scheme import Scheme, normalize_scheme
from .typing import LoggerLike, URILike


__all__ = [
    "Form",
    "State",
    "Parser",
    "find_userinfo",
]


# Forms of the request-target that go through the state machine.
# See https://www.rfc-editor.org/rfc/rfc7230.html#section-5.3


class Form(enum.IntEnum):
    ABSOLUTE, ORIGIN, AUTHORITY = range(3)


ABSOLUTE = Form.ABSOLUTE
ORIGIN = Form.ORIGIN
AUTHORITY = Form.AUTHORITY


class State(enum.IntEnum):
    """
    Position in the grammar.

    ``*_START`` states consume the delimiter introducing a component, if any,
    and open its span. The following state closes the span when it reaches a
    delimiter that ends the component.

    """

    SCHEME_START, SCHEME = 0, 1
    SLASH_START, SLASH = 2, 3
    USERNAME_START, USERNAME, PASSWORD_START, PASSWORD = 4, 5, 6, 7
    HOST_START, HOST, PORT_START, PORT = 8, 9, 10, 11
    PATH_START, PATH = 12, 13
    QUERY_START, QUERY = 14, 15
    FRAGMENT_START, FRAGMENT = 16, 17
    DONE = 18


START_STATES = {
    ABSOLUTE: State.SCHEME_START,
    ORIGIN: State.PATH_START,
    AUTHORITY: State.USERNAME_START,
}


COLON, SOLIDUS, QMARK, HASH, AT, PERCENT = b":/?#@%"
LBRACKET, RBRACKET = b"[]"

# Bytes allowed in a scheme after the first letter, besides letters and digits.
_SCHEME_EXTRA = frozenset(b"+-.")

# Bytes that end a host.
_HOST_END = frozenset(b":/?#")

# Bytes that end a port.
_PORT_END = frozenset(b"/?#")

# Largest TCP port. Larger values wrap around in some clients.
MAX_PORT = 65535


def _is_userinfo(c: int) -> bool:
    return is_uchar(c) or is_sub_delims(c)


def _is_password(c: int) -> bool:
    return is_uchar(c) or is_sub_delims(c) or c == HASH


def _is_reg_name(c: int) -> bool:
    return is_unreserved(c) or is_sub_delims(c)


def _is_path(c: int) -> bool:
    return is_hsegment(c) or c == SOLIDUS


def _is_query(c: int) -> bool:
    return is_hsegment(c) or is_sub_delims(c) or c == SOLIDUS or c == QMARK


def _lower(c: int) -> int:
    return c + 0x20 if 0x41 <= c <= 0x5A else c


def describe(c: Optional[int]) -> str:
    """
    Describe a byte for interpolating into an error message.

    """
    if c is None:
        return "end of input"
    return repr(bytes([c]))[1:]


_userinfo_end_re = re.compile(rb"[/?#@]")


def find_userinfo(data: bytes, pos: int) -> int:
    """
    Look for user information in the authority starting at ``pos``.

    Scan ``data`` without consuming it for the first ``/``, ``?``, ``#`` or
    ``@``. User information is present only if it's an ``@``.

    Return the position of this ``@``.

    Raise :exc:`~uriparts.exceptions.Mismatch` if there's no user
    information.

    Only the first ``@`` of the authority is considered. In
    ``http://trusted.example@evil.example/``, the host is ``evil.example``.
    In ``http://a@b@c/``, the second ``@`` is an error, not user information.

    """
    match = _userinfo_end_re.search(data, pos)
    if match is None or match.group() != b"@":
        raise Mismatch(data, "no user information", pos)
    return match.start()


def to_bytes(uri: URILike) -> bytes:
    if isinstance(uri, str):
        # Non-ASCII characters become bytes above 0x7f, which are rejected.
        return uri.encode("utf-8", "surrogatepass")
    elif isinstance(uri, (bytes, bytearray, memoryview)):
        return bytes(uri)
    else:
        raise TypeError(f"expected str or bytes-like object, got {type(uri).__name__}")


class Parser:
    """
    URI parser.

    A parser holds only configuration. It doesn't keep state between calls to
    :meth:`parse`; each call works on its own :class:`~uriparts.buffer.Buffer`.

    Args:
        capacity: Size limit of buffers created by :meth:`parse`, in bytes;
            :obj:`None` for buffers that grow as needed.
        logger: Logger for this parser; defaults to
            ``logging.getLogger("uriparts.parser")``.

    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        self.capacity = capacity

        if logger is None:
            logger = logging.getLogger("uriparts.parser")
        self.logger = logger

        # Track if DEBUG is enabled. Shortcut logging calls if it isn't.
        self.debug = logger.isEnabledFor(logging.DEBUG)

    def parse(
        self,
        uri: URILike,
        buffer: Optional[Buffer] = None,
        form: Form = ABSOLUTE,
    ) -> Parts:
        """
        Parse ``uri`` and return its components.

        The decoded components are written into ``buffer``, which is cleared
        first. If ``buffer`` isn't provided, a new one is created.

        The input isn't modified.

        :raises InvalidURI: if ``uri`` isn't valid
        :raises CapacityExceeded: if ``buffer`` has a fixed capacity and the
            decoded URI doesn't fit

        """
        data = to_bytes(uri)
        if buffer is None:
            buffer = Buffer(self.capacity)
        buffer.clear()

        try:
            known_scheme = self.run(data, buffer, form)
        except (InvalidURI, CapacityExceeded) as exc:
            # Components parsed before the error must not be used.
            buffer.clear()
            if self.debug:
                self.logger.debug("! %s", exc)
            raise

        if self.debug:
            self.logger.debug("= %r", buffer)
        return buffer.parts(known_scheme)

    def run(self, data: bytes, out: Buffer, form: Form) -> Scheme:
        """
        Run the state machine over ``data``, writing components into ``out``.

        Return the known scheme of the URI.

        """
        known_scheme = Scheme.UNKNOWN
        state = START_STATES[form]
        # Select the IP-literal grammar in the HOST state.
        is_ipv6 = False
        # Value of the digits read in the PORT state.
        port = 0
        pos = 0

        while state is not State.DONE:
            # c is None at the end of the input.
            c = data[pos] if pos < len(data) else None

            if state is State.SCHEME_START:
                if not is_alpha(c):
                    raise InvalidURI(data, "scheme must start with a letter", pos)
                out.open_span()
                state = State.SCHEME

            elif state is State.SCHEME:
                if c == COLON:
                    out.close_span(Component.SCHEME)
                    scheme = out.part(Component.SCHEME)
                    assert scheme is not None
                    _, known_scheme = normalize_scheme(scheme.decode("ascii"))
                    out.append(c)
                    pos += 1
                    state = State.SLASH_START
                elif is_alpha(c) or is_digit(c) or c in _SCHEME_EXTRA:
                    out.append(_lower(c))
                    pos += 1
                else:
                    raise InvalidURI(
                        data, f"unexpected {describe(c)} in scheme", pos
                    )

            elif state is State.SLASH_START or state is State.SLASH:
                if c != SOLIDUS:
                    raise InvalidURI(data, "expected '//' after scheme", pos)
                out.append(c)
                pos += 1
                if state is State.SLASH_START:
                    state = State.SLASH
                    continue
                if known_scheme is Scheme.FILE:
                    # file:///path has an empty authority: the third slash
                    # starts the path and there's no host. file://host/path
                    # isn't supported.
                    if pos == len(data) or data[pos] != SOLIDUS:
                        raise Mismatch(data, "expected 'file:///'", pos)
                    state = State.PATH_START
                else:
                    state = State.USERNAME_START

            elif state is State.USERNAME_START:
                try:
                    find_userinfo(data, pos)
                except Mismatch:
                    state = State.HOST_START
                else:
                    out.open_span()
                    state = State.USERNAME

            elif state is State.USERNAME:
                if c == COLON:
                    out.close_span(Component.USERNAME)
                    out.append(c)
                    pos += 1
                    state = State.PASSWORD_START
                elif c == AT:
                    out.close_span(Component.USERNAME)
                    out.append(c)
                    pos += 1
                    state = State.HOST_START
                else:
                    pos = self.append_char(data, pos, out, _is_userinfo, "username")

            elif state is State.PASSWORD_START:
                out.open_span()
                state = State.PASSWORD

            elif state is State.PASSWORD:
                if c == AT:
                    out.close_span(Component.PASSWORD)
                    out.append(c)
                    pos += 1
                    state = State.HOST_START
                else:
                    pos = self.append_char(data, pos, out, _is_password, "password")

            elif state is State.HOST_START:
                if c == LBRACKET:
                    is_ipv6 = True
                    out.append(c)
                    pos += 1
                out.open_span()
                state = State.HOST

            elif state is State.HOST and is_ipv6:
                if c == RBRACKET:
                    self.close_host(data, pos, out)
                    out.append(c)
                    pos += 1
                    c = data[pos] if pos < len(data) else None
                    if c is not None and c not in _HOST_END:
                        raise InvalidURI(
                            data, f"unexpected {describe(c)} after IP literal", pos
                        )
                    state = self.after_authority(data, pos, form, port=True)
                elif c is None:
                    raise InvalidURI(data, "unterminated IP literal", pos)
                elif is_hex(c) or c == COLON:
                    out.append(c)
                    pos += 1
                else:
                    raise InvalidURI(
                        data, f"unexpected {describe(c)} in IP literal", pos
                    )

            elif state is State.HOST:
                if c is None or c in _HOST_END:
                    self.close_host(data, pos, out)
                    state = self.after_authority(data, pos, form, port=True)
                else:
                    pos = self.append_char(data, pos, out, _is_reg_name, "host")

            elif state is State.PORT_START:
                assert c == COLON
                out.append(c)
                pos += 1
                out.open_span()
                state = State.PORT

            elif state is State.PORT:
                if is_digit(c):
                    port = port * 10 + c - 0x30
                    if port > MAX_PORT:
                        raise InvalidURI(data, "port out of range", pos)
                    out.append(c)
                    pos += 1
                elif c is None or c in _PORT_END:
                    if len(out) == out.start:
                        raise InvalidURI(data, "empty port", pos)
                    out.close_span(Component.PORT)
                    state = self.after_authority(data, pos, form, port=False)
                else:
                    # This includes a second colon, as in host:port:port.
                    raise InvalidURI(data, f"unexpected {describe(c)} in port", pos)

            elif state is State.PATH_START:
                if c != SOLIDUS:
                    raise InvalidURI(data, "path must start with '/'", pos)
                out.open_span()
                state = State.PATH

            elif state is State.PATH:
                if c == QMARK:
                    out.close_span(Component.PATH)
                    state = State.QUERY_START
                elif c == HASH:
                    out.close_span(Component.PATH)
                    state = self.fragment_start(data, pos, form)
                elif c is None:
                    out.close_span(Component.PATH)
                    state = State.DONE
                else:
                    pos = self.append_char(data, pos, out, _is_path, "path")

            elif state is State.QUERY_START:
                assert c == QMARK
                out.append(c)
                pos += 1
                out.open_span()
                state = State.QUERY

            elif state is State.QUERY:
                if c == HASH:
                    out.close_span(Component.QUERY)
                    state = self.fragment_start(data, pos, form)
                elif c is None:
                    out.close_span(Component.QUERY)
                    state = State.DONE
                else:
                    pos = self.append_char(data, pos, out, _is_query, "query")

            elif state is State.FRAGMENT_START:
                assert c == HASH
                out.append(c)
                pos += 1
                out.open_span()
                state = State.FRAGMENT

            elif state is State.FRAGMENT:
                if c is None:
                    out.close_span(Component.FRAGMENT)
                    state = State.DONE
                else:
                    pos = self.append_char(data, pos, out, _is_query, "fragment")

            else:  # pragma: no cover
                raise AssertionError(f"unexpected state: {state!r}")

        return known_scheme

    def append_char(
        self,
        data: bytes,
        pos: int,
        out: Buffer,
        is_legal: Callable[[int], bool],
        component: str,
    ) -> int:
        """
        Copy one character of ``component`` from ``data`` at ``pos`` to ``out``.

        Decode it if it's percent-encoded.

        Return the new position.

        """
        c = data[pos] if pos < len(data) else None
        if c == PERCENT:
            byte, pos = decode_percent(data, pos)
            out.append(byte)
            return pos
        if c is None or not is_legal(c):
            raise InvalidURI(data, f"unexpected {describe(c)} in {component}", pos)
        out.append(c)
        return pos + 1

    def close_host(self, data: bytes, pos: int, out: Buffer) -> None:
        if len(out) == out.start:
            raise InvalidURI(data, "empty host", pos)
        out.close_span(Component.HOST)

    def after_authority(self, data: bytes, pos: int, form: Form, port: bool) -> State:
        """
        Return the state following the host, or the port if ``port`` is false.

        """
        c = data[pos] if pos < len(data) else None
        if c is None:
            return State.DONE
        if c == COLON and port:
            return State.PORT_START
        if form is not AUTHORITY:
            if c == SOLIDUS:
                return State.PATH_START
            if c == QMARK:
                return State.QUERY_START
            if c == HASH:
                return self.fragment_start(data, pos, form)
        raise InvalidURI(data, f"unexpected {describe(c)} after authority", pos)

    def fragment_start(self, data: bytes, pos: int, form: Form) -> State:
        if form is ORIGIN:
            raise InvalidURI(data, "fragment isn't allowed in origin-form", pos)
        return State.FRAGMENT_START
