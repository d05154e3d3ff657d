from __future__ import annotations

from typing import Dict, Iterator, NamedTuple, Optional

from .exceptions import CapacityExceeded
from .parts import Component, Parts
from .scheme import Scheme


__all__ = [
    "Component",
    "Span",
    "Buffer",
]


class Span(NamedTuple):
    """
    Half-open range ``[start, end)`` of a component in a :class:`Buffer`.

    """

    start: int
    end: int


class Buffer:
    """
    Append-only byte store recording the boundaries of URI components.

    The parser writes the decoded URI, delimiters included, and records a
    :class:`Span` for each component it finds. A component without a span is
    absent. A component with an empty span is present but empty, for example
    the query in ``http://example.com?``.

    Spans never move once recorded because the store only grows during a
    parse. :meth:`clear` empties it before the next one.

    When ``capacity`` is set, the store doesn't grow beyond ``capacity``
    bytes: :meth:`append` raises :exc:`~uriparts.exceptions.CapacityExceeded`
    instead of dropping data.

    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be a non-negative integer or None")
        self.capacity = capacity
        self.data = bytearray()
        self.spans: Dict[Component, Span] = {}
        # Start of the span being built, set by open_span().
        self.start: Optional[int] = None

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __contains__(self, component: object) -> bool:
        return component in self.spans

    def __iter__(self) -> Iterator[Component]:
        return iter(sorted(self.spans))

    def __repr__(self) -> str:
        spans = ", ".join(
            f"{component.name.lower()}={self.part(component)!r}" for component in self
        )
        return f"{self.__class__.__name__}({spans})"

    def append(self, byte: int) -> None:
        """
        Append one byte to the store.

        :raises CapacityExceeded: if the store has a fixed capacity and is full

        """
        if self.capacity is not None and len(self.data) >= self.capacity:
            raise CapacityExceeded(self.capacity)
        self.data.append(byte)

    def open_span(self) -> None:
        """
        Start a span at the current end of the store.

        """
        assert self.start is None, "span already open"
        self.start = len(self.data)

    def close_span(self, component: Component) -> Span:
        """
        End the open span at the current end of the store.

        Record it for ``component`` and return it.

        """
        assert self.start is not None, "no span open"
        assert component not in self.spans, f"{component.name} already recorded"
        # Spans are recorded in parse order and don't overlap.
        assert all(span.end <= self.start for span in self.spans.values())
        span = Span(self.start, len(self.data))
        self.spans[component] = span
        self.start = None
        return span

    def clear(self) -> None:
        """
        Forget the previous parse.

        """
        del self.data[:]
        self.spans.clear()
        self.start = None

    def span(self, component: Component) -> Optional[Span]:
        """
        Return the span of ``component``, :obj:`None` if it's absent.

        """
        return self.spans.get(component)

    def part(self, component: Component) -> Optional[bytes]:
        """
        Return the decoded bytes of ``component``, :obj:`None` if it's absent.

        """
        span = self.spans.get(component)
        if span is None:
            return None
        return bytes(self.data[span.start : span.end])

    def parts(self, known_scheme: Scheme = Scheme.UNKNOWN) -> Parts:
        """
        Build an immutable :class:`~uriparts.parts.Parts` record.

        The record doesn't reference the buffer, which may be reused.

        """
        assert self.start is None, "span still open"
        values = {}
        for component in Component:
            part = self.part(component)
            values[component.name.lower()] = (
                "" if part is None else part.decode("utf-8", "surrogateescape")
            )
        return Parts(
            known_scheme=known_scheme,
            present=frozenset(self.spans),
            **values,
        )
