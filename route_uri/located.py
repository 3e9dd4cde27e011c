"""Route URIs tied to the place they were found in a document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, NamedTuple, Set, Union

from route_uri.uri import RouteUri

logger = logging.getLogger(__name__)


class UriSpan(NamedTuple):
    """A URI found in document text: its raw text and where it sits."""

    raw: str
    offset: int
    length: int


@dataclass(frozen=True)
class LocatedUri:
    """
    A :class:`RouteUri` plus its location in some document.

    Attribute access falls through to the wrapped URI, so a located URI
    answers ``segments``, ``starts_with`` and the rest directly. Equality and
    hashing only look at the URI, which makes two occurrences of the same
    route equal regardless of where they were found, and equal to the plain
    :class:`RouteUri` with the same raw text.

    Attributes:
        uri: The wrapped route URI (raw text is wrapped on construction)
        offset: Start of the URI in the document
        length: Length of the URI span in the document

    Example:
        >>> LocatedUri("/users/:id", 10, 10).segments
        ('users', ':id')
    """

    uri: RouteUri
    offset: int = field(compare=False)
    length: int = field(compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.uri, str):
            object.__setattr__(self, "uri", RouteUri(self.uri))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LocatedUri):
            return self.uri == other.uri
        if isinstance(other, RouteUri):
            return self.uri == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.uri)

    @classmethod
    def from_raw(cls, raw: str, offset: int, length: int) -> "LocatedUri":
        return cls(RouteUri(raw), offset, length)

    @classmethod
    def from_span(cls, span: UriSpan) -> "LocatedUri":
        return cls.from_raw(span.raw, span.offset, span.length)

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes LocatedUri itself does not define
        if name.startswith("_") or name == "uri":
            raise AttributeError(name)
        return getattr(self.uri, name)

    def __str__(self) -> str:
        return self.uri.raw

    @property
    def end(self) -> int:
        """Offset just past the URI span."""
        return self.offset + self.length

    def contains(self, position: int) -> bool:
        """True if ``position`` lies inside the span or right at its end."""
        return self.offset <= position <= self.end


UriLike = Union[RouteUri, LocatedUri]


def all_uris_in_spans(spans: Iterable[UriSpan]) -> List[LocatedUri]:
    """
    Wrap every non-empty span in a :class:`LocatedUri`, in document order.

    Negative lengths count as empty.
    """
    located = []
    for span in spans:
        span = UriSpan(*span)
        if max(0, span.length) > 0:
            located.append(LocatedUri.from_span(span))
        else:
            logger.debug(f"Skipping empty URI span at offset {span.offset}")
    return located


def existing_uris(spans: Iterable[UriSpan]) -> Set[RouteUri]:
    """Return the distinct route URIs found in ``spans``."""
    return {located.uri for located in all_uris_in_spans(spans)}


def sort_key(uri: UriLike) -> str:
    """Alphabetical sort key for :class:`RouteUri` and :class:`LocatedUri`."""
    return str(uri)


def sorted_uris(uris: Iterable[UriLike]) -> List[UriLike]:
    """Sort URIs alphabetically by their raw text."""
    return sorted(uris, key=sort_key)
