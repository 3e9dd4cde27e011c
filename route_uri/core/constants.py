"""
Constants and configuration defaults for route-uri.

This module centralizes separators, marker tokens and routes-file syntax
so they are not hardcoded throughout the codebase.
"""

from typing import List, Tuple

# ============================================================================
# URI Syntax
# ============================================================================

SEPARATOR: str = "/"
"""Path segment separator"""

DYNAMIC_MARKERS: Tuple[str, ...] = (":", "*", "$")
"""Dynamic segment prefixes: path parameter, wildcard tail, regex capture"""

NO_MATCH: int = -1
"""Sentinel returned by prefix_length when there is no common prefix"""

# ============================================================================
# Routes File Syntax
# ============================================================================

DEFAULT_HTTP_METHODS: List[str] = [
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "HEAD",
    "OPTIONS",
    "*",
]
"""Methods recognized as the first token of a route line"""

SUBROUTER_TOKEN: str = "->"
"""First token of a line that mounts another router under a URI"""

MODIFIER_PREFIX: str = "+"
"""Prefix of route modifier lines (e.g. '+ nocsrf')"""

DEFAULT_COMMENT_PREFIX: str = "#"
"""Prefix of comment lines"""

# ============================================================================
# Environment
# ============================================================================

ENV_MAX_CANDIDATES: str = "ROUTE_URI_MAX_CANDIDATES"
"""Environment variable overriding the completion candidate limit"""
