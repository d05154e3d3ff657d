from __future__ import annotations

from .buffer import Buffer, Span
from .exceptions import CapacityExceeded, InvalidURI, Mismatch, URIException
from .parser import Form, Parser, State
from .parts import Component, Parts
from .scheme import Scheme, normalize_scheme, string_to_scheme
from .typing import LoggerLike, URILike
from .uri import (
    parse_absolute_form,
    parse_asterisk_form,
    parse_authority_form,
    parse_origin_form,
    parse_request_target,
    parse_uri,
)
from .version import version as __version__  # noqa: F401


__all__ = [
    # .buffer
    "Buffer",
    "Span",
    # .exceptions
    "CapacityExceeded",
    "InvalidURI",
    "Mismatch",
    "URIException",
    # .parser
    "Form",
    "Parser",
    "State",
    # .parts
    "Component",
    "Parts",
    # .scheme
    "Scheme",
    "normalize_scheme",
    "string_to_scheme",
    # .typing
    "LoggerLike",
    "URILike",
    # .uri
    "parse_absolute_form",
    "parse_asterisk_form",
    "parse_authority_form",
    "parse_origin_form",
    "parse_request_target",
    "parse_uri",
]
