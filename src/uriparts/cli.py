from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .exceptions import URIException
from .parts import Component, Parts
from .uri import (
    parse_absolute_form,
    parse_asterisk_form,
    parse_authority_form,
    parse_origin_form,
    parse_request_target,
)
from .version import version as uriparts_version


__all__ = ["main"]


FORMS = {
    "absolute": parse_absolute_form,
    "origin": parse_origin_form,
    "authority": parse_authority_form,
    "asterisk": parse_asterisk_form,
}


def format_parts(parts: Parts) -> str:
    lines = []
    for component in Component:
        if component in parts.present:
            value = getattr(parts, component.name.lower())
            lines.append(f"{component.name.lower()}: {value!r}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    # Parse command line arguments.
    parser = argparse.ArgumentParser(
        prog="python -m uriparts",
        description="Split URIs into their components.",
    )
    parser.add_argument("--version", action="store_true")
    parser.add_argument(
        "--form",
        choices=[*FORMS, "target"],
        default="absolute",
        help="request-target form; 'target' selects it from --method",
    )
    parser.add_argument("--method", default="GET")
    parser.add_argument("--capacity", type=int, default=None)
    parser.add_argument("uris", metavar="<uri>", nargs="*")
    args = parser.parse_args(argv)

    if args.version:
        print(f"uriparts {uriparts_version}")
        return

    if not args.uris:
        parser.error("the following arguments are required: <uri>")

    for index, uri in enumerate(args.uris):
        # Don't let the shell encoding get in the way: parse the raw bytes.
        raw = uri.encode("utf-8", "surrogateescape")
        try:
            if args.form == "target":
                parts = parse_request_target(
                    raw, args.method, capacity=args.capacity
                )
            else:
                parts = FORMS[args.form](raw, capacity=args.capacity)
        except URIException as exc:
            print(f"Failed to parse {uri}: {exc}.", file=sys.stderr)
            sys.exit(1)
        if index:
            print()
        print(format_parts(parts))

