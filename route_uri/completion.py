"""Completion and cursor resolution over the routes known in a document."""

import logging
from typing import Iterable, List, NamedTuple, Optional, Union

from route_uri.core.config import AppConfig
from route_uri.core.constants import SEPARATOR
from route_uri.core.segments import render_segments
from route_uri.located import LocatedUri, sort_key
from route_uri.uri import RouteUri

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """Segments around a cursor inside one located URI."""

    located: LocatedUri
    prefix: List[str]
    touched: List[str]


def complete_segments(prefix: str) -> List[str]:
    """
    Segments of a typed prefix that the user has finished typing.

    The last segment is still being typed unless the prefix ends with '/'.
    """
    segments = list(RouteUri(prefix).segments)
    if segments and not prefix.endswith(SEPARATOR):
        segments.pop()
    return segments


class CompletionEngine:
    """
    Proposes route URIs for a typed prefix.

    Attributes:
        known: Distinct route URIs found in the document
        config: Application configuration

    Example:
        >>> engine = CompletionEngine([RouteUri("/users/:id")])
        >>> [str(u) for u in engine.candidates("/us")][:2]
        ['/users', '/users/:id']
    """

    def __init__(
        self,
        known: Iterable[Union[RouteUri, LocatedUri]],
        config: Optional[AppConfig] = None,
    ):
        self.config = config or AppConfig()
        self.known = {uri.uri if isinstance(uri, LocatedUri) else uri for uri in known}
        logger.debug(f"Completion engine initialized with {len(self.known)} routes")

    def candidates(self, prefix: str) -> List[RouteUri]:
        """
        Completion candidates for ``prefix``, shortest first.

        Routes derived from the known URIs come first, ordered by segment
        count and then alphabetically. Dynamic segments appended to the
        complete part of the prefix follow when enabled.
        """
        found = set()
        for uri in self.known:
            found.update(uri.sub_uris_starting_with(prefix))
        result = sorted(found, key=lambda uri: (len(uri.segments), sort_key(uri)))

        if self.config.offer_dynamic_segments and RouteUri(prefix).is_valid:
            base = RouteUri(render_segments(complete_segments(prefix)))
            for marker in self.config.dynamic_markers:
                dynamic = base.append(marker)
                if dynamic not in found:
                    result.append(dynamic)

        if self.config.max_candidates is not None:
            result = result[: self.config.max_candidates]

        logger.debug(f"{len(result)} candidates for {prefix!r}")
        return result

    def replacement_offset(self, uri: RouteUri, prefix: str) -> int:
        """
        Offset in ``uri`` where the incomplete part of ``prefix`` starts.

        Returns -1 when ``uri`` doesn't share the prefix's complete segments.
        """
        return uri.prefix_length(complete_segments(prefix))

    @staticmethod
    def resolve(
        located_uris: Iterable[LocatedUri], position: int, length: int = 0
    ) -> Optional[Resolution]:
        """
        Find the URI under a document position and the segments it touches.

        Args:
            located_uris: URIs with their document locations
            position: Document offset of the caret or selection start
            length: Selection length (0 for a caret)

        Returns:
            Resolution for the first URI whose span contains ``position``,
            or None when the position is outside every URI
        """
        for located in located_uris:
            if located.contains(position):
                prefix, touched = located.parts_touched_by(position - located.offset, length)
                return Resolution(located, prefix, touched)
        return None
