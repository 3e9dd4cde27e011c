"""
Routes file scanning.

This module finds the URI column of every route in a Play-style routes file
and reports it as a :class:`~route_uri.located.UriSpan` with its absolute
offset in the text. A route line looks like::

    GET     /users/:id          controllers.Users.show(id: Long)
    ->      /admin              admin.Routes
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional

from route_uri.core.config import AppConfig
from route_uri.core.constants import MODIFIER_PREFIX, SUBROUTER_TOKEN
from route_uri.core.exceptions import RoutesFileError
from route_uri.located import LocatedUri, UriSpan, all_uris_in_spans

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\S+")


class RoutesFileScanner:
    """
    Extracts URI spans from routes file text.

    Attributes:
        config: Application configuration
        methods: Upper-case tokens accepted as the first column of a route

    Example:
        >>> scanner = RoutesFileScanner(AppConfig())
        >>> list(scanner.scan_text("GET /users controllers.Users.list"))
        [UriSpan(raw='/users', offset=4, length=6)]
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize routes file scanner.

        Args:
            config: Application configuration (defaults when omitted)
        """
        self.config = config or AppConfig()
        self.methods = set(self.config.http_methods) | {SUBROUTER_TOKEN}

    def scan_text(self, text: str) -> Iterator[UriSpan]:
        """
        Yield the URI span of every route line in ``text``.

        Args:
            text: Full routes file content

        Yields:
            UriSpan for each route, in document order
        """
        line_offset = 0
        for line_number, line in enumerate(text.splitlines(keepends=True), start=1):
            span = self._scan_line(line, line_offset, line_number)
            if span is not None:
                yield span
            line_offset += len(line)

    def _scan_line(self, line: str, line_offset: int, line_number: int) -> Optional[UriSpan]:
        stripped = line.strip()
        if (
            not stripped
            or stripped.startswith(self.config.comment_prefix)
            or stripped.startswith(MODIFIER_PREFIX)
        ):
            return None

        tokens = list(_TOKEN.finditer(line))
        if tokens[0].group().upper() not in self.methods:
            logger.debug(f"Line {line_number}: not a route ({tokens[0].group()!r})")
            return None
        if len(tokens) < 2:
            logger.debug(f"Line {line_number}: route without URI")
            return None

        uri = tokens[1]
        return UriSpan(uri.group(), line_offset + uri.start(), len(uri.group()))

    def scan_file(self, path: Path) -> List[UriSpan]:
        """
        Read a routes file and return its URI spans.

        Raises:
            RoutesFileError: If the file doesn't exist or cannot be read
        """
        path = Path(path)
        if not path.exists():
            raise RoutesFileError(f"Routes file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RoutesFileError(f"Cannot read routes file: {path}", str(e))

        spans = list(self.scan_text(text))
        logger.info(f"Found {len(spans)} route URIs in {path}")
        return spans

    def located_uris(self, path: Path) -> List[LocatedUri]:
        """Scan ``path`` and wrap each URI span in a LocatedUri."""
        return all_uris_in_spans(self.scan_file(path))
