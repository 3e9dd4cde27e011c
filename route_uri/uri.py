"""
URI values for route configuration files.

A :class:`RouteUri` wraps the raw text of a route path (``/users/:id/*rest``)
together with its path segments and answers the questions an editor asks
about it: does it start with what the user typed, which longer routes can
complete the typed text, and which segments does a selection cover.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from route_uri.core.constants import DYNAMIC_MARKERS, NO_MATCH, SEPARATOR
from route_uri.core.segments import render_segments, split_segments, starts_with_segments


@dataclass(frozen=True)
class RouteUri:
    """
    Immutable route URI.

    Equality and hashing use ``raw`` alone; ``segments`` and ``is_valid`` are
    derived from it on construction. Construction never fails: a URI that
    does not start with '/' is simply not valid.

    Attributes:
        raw: The URI text exactly as supplied
        segments: Non-empty path segments of ``raw``

    Example:
        >>> uri = RouteUri("/users/:id")
        >>> uri.segments
        ('users', ':id')
        >>> [str(u) for u in uri.sub_uris_starting_with("/us")]
        ['/users', '/users/:id']
    """

    raw: str
    segments: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(split_segments(self.raw)))

    @property
    def is_valid(self) -> bool:
        """True when the raw text starts with '/'."""
        return self.raw.startswith(SEPARATOR)

    def __str__(self) -> str:
        return self.raw

    def _render(self, segments: Sequence[str]) -> str:
        return render_segments(segments, self.is_valid)

    def prefix_length(self, prefix_segments: Sequence[str]) -> int:
        """
        Length of the text covered by ``prefix_segments``, or -1 if this URI
        does not start with them.

        When the prefix is a strict, non-empty prefix the result is one more
        than the rendered prefix, to account for the separator that follows.

        Example:
            >>> RouteUri("/a/b/c").prefix_length(["a"])
            3
            >>> RouteUri("/a").prefix_length(["a"])
            2
        """
        if not self.starts_with(prefix_segments):
            return NO_MATCH

        prefix_segments = tuple(prefix_segments)
        length = len(self._render(prefix_segments))
        if prefix_segments == self.segments or not prefix_segments:
            return length
        return length + 1

    def starts_with(self, prefix: Union[str, Sequence[str]]) -> bool:
        """
        Check whether this URI starts with ``prefix``.

        A string prefix is parsed and compared on the canonical renderings of
        both sides, so ``/users`` starts with ``/us`` and with ``us``. A
        sequence of segments is compared segment by segment.
        """
        if isinstance(prefix, str):
            other = RouteUri(prefix)
            return render_segments(self.segments).startswith(render_segments(other.segments))
        return starts_with_segments(self.segments, prefix)

    def sub_uris_starting_with(self, prefix: str) -> List["RouteUri"]:
        """
        List the completion candidates this URI offers for ``prefix``.

        The last segment of the prefix may still be incomplete, so the
        candidates start one segment before it and grow one segment at a
        time up to the full URI.
        """
        if not self.starts_with(prefix):
            return []

        split_point = max(0, len(RouteUri(prefix).segments) - 1)
        common = list(self.segments[:split_point])
        additional = self.segments[split_point:]
        return [
            RouteUri(self._render(common + list(additional[:i])))
            for i in range(1, len(additional) + 1)
        ]

    def append(self, segment: str) -> "RouteUri":
        """Return a new URI with ``segment`` added at the end."""
        return RouteUri(self._render(self.segments + (segment,)))

    @property
    def dynamic_uris(self) -> List["RouteUri"]:
        """This URI extended with each dynamic marker (':', '*', '$')."""
        return [self.append(marker) for marker in DYNAMIC_MARKERS]

    def parts_touched_by(self, offset: int, length: int) -> Tuple[List[str], List[str]]:
        """
        Resolve a text range to the segments around it.

        Args:
            offset: Start of the range, relative to the URI text
            length: Length of the range (0 for a caret)

        Returns:
            ``(prefix, touched)``: the segments entirely before the range and
            the segments the range covers

        A caret is looked up one character earlier, so a caret right before
        a '/' belongs to the segment preceding it. Offsets outside the text
        are not an error; the scans stop when segments run out.

        Example:
            >>> RouteUri("/abc/def").parts_touched_by(1, 3)
            ([], ['abc'])
            >>> RouteUri("/abc/def").parts_touched_by(4, 0)
            ([], ['abc'])
        """
        scan_offset = offset - 1 if length == 0 else offset

        prefix: List[str] = []
        remaining = list(self.segments)
        while remaining and scan_offset > len(remaining[0]):
            segment = remaining.pop(0)
            prefix.append(segment)
            scan_offset -= len(segment) + 1

        end_offset = offset + length - sum(len(segment) + 1 for segment in prefix)
        touched: List[str] = []
        while end_offset >= 1 and remaining:
            segment = remaining.pop(0)
            touched.append(segment)
            end_offset -= len(segment) + 1

        return prefix, touched
