"""
Parse request targets in the four forms of :rfc:`7230#section-5.3`::

    request-target = origin-form
                   / absolute-form
                   / authority-form
                   / asterisk-form

"""

from __future__ import annotations

import logging
from typing import Optional

from .buffer import Buffer
from .exceptions import CapacityExceeded, InvalidURI
from .parser import ABSOLUTE, AUTHORITY, ORIGIN, Parser, to_bytes
from .parts import Component, Parts
from .typing import LoggerLike, URILike


__all__ = [
    "parse_uri",
    "parse_absolute_form",
    "parse_origin_form",
    "parse_authority_form",
    "parse_asterisk_form",
    "parse_request_target",
]


def parse_absolute_form(
    uri: URILike,
    buffer: Optional[Buffer] = None,
    *,
    capacity: Optional[int] = None,
    logger: Optional[LoggerLike] = None,
) -> Parts:
    """
    Parse a URI in absolute form.

    Absolute form is used in HTTP requests to a proxy::

        GET http://www.example.org/pub/WWW/TheProject.html HTTP/1.1

    The URI must have an authority. A fragment is accepted so that full URLs
    can be parsed too.

    Args:
        uri: URI to parse.
        buffer: Buffer receiving the decoded components; a new one is
            created if it isn't provided.
        capacity: Size limit of the new buffer, in bytes.
        logger: Logger for the parser.

    Raises:
        InvalidURI: if ``uri`` isn't valid.
        CapacityExceeded: if the decoded URI exceeds the buffer capacity.

    """
    return Parser(capacity, logger).parse(uri, buffer, ABSOLUTE)


parse_uri = parse_absolute_form


def parse_origin_form(
    target: URILike,
    buffer: Optional[Buffer] = None,
    *,
    capacity: Optional[int] = None,
    logger: Optional[LoggerLike] = None,
) -> Parts:
    """
    Parse a request target in origin form.

    Origin form is used in direct requests to an origin server::

        GET /index.html?lang=en HTTP/1.1

    Only the path and the query are present::

        origin-form = absolute-path [ "?" query ]

    See :func:`parse_absolute_form` for arguments and exceptions.

    """
    return Parser(capacity, logger).parse(target, buffer, ORIGIN)


def parse_authority_form(
    target: URILike,
    buffer: Optional[Buffer] = None,
    *,
    capacity: Optional[int] = None,
    logger: Optional[LoggerLike] = None,
) -> Parts:
    """
    Parse a request target in authority form.

    Authority form is used only in CONNECT requests::

        CONNECT www.example.com:80 HTTP/1.1

    CONNECT requests mustn't include user information, but it's parsed
    anyway. Callers decide what to do with it.

    See :func:`parse_absolute_form` for arguments and exceptions.

    """
    return Parser(capacity, logger).parse(target, buffer, AUTHORITY)


def parse_asterisk_form(
    target: URILike,
    buffer: Optional[Buffer] = None,
    *,
    capacity: Optional[int] = None,
    logger: Optional[LoggerLike] = None,
) -> Parts:
    """
    Parse a request target in asterisk form.

    Asterisk form is used only in server-wide OPTIONS requests::

        OPTIONS * HTTP/1.1

    The only valid target is ``*``. It's returned as the path.

    See :func:`parse_absolute_form` for arguments and exceptions.

    """
    if logger is None:
        logger = logging.getLogger("uriparts.parser")

    data = to_bytes(target)
    if buffer is None:
        buffer = Buffer(capacity)
    buffer.clear()

    try:
        if data != b"*":
            raise InvalidURI(data, "asterisk-form must be '*'")
        buffer.open_span()
        buffer.append(data[0])
        buffer.close_span(Component.PATH)
    except (InvalidURI, CapacityExceeded) as exc:
        buffer.clear()
        logger.debug("! %s", exc)
        raise

    logger.debug("= %r", buffer)
    return buffer.parts()


def parse_request_target(
    target: URILike,
    method: str = "GET",
    buffer: Optional[Buffer] = None,
    *,
    capacity: Optional[int] = None,
    logger: Optional[LoggerLike] = None,
) -> Parts:
    """
    Parse the request target of an HTTP request.

    The form is selected from ``method`` and the first character of
    ``target``:

    * CONNECT requests use authority form;
    * OPTIONS requests may use asterisk form;
    * targets starting with ``/`` use origin form;
    * other targets use absolute form.

    See :func:`parse_absolute_form` for arguments and exceptions.

    """
    data = to_bytes(target)
    if method == "CONNECT":
        return parse_authority_form(data, buffer, capacity=capacity, logger=logger)
    if method == "OPTIONS" and data == b"*":
        return parse_asterisk_form(data, buffer, capacity=capacity, logger=logger)
    if data.startswith(b"/"):
        return parse_origin_form(data, buffer, capacity=capacity, logger=logger)
    return parse_absolute_form(data, buffer, capacity=capacity, logger=logger)
