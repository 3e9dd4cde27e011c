"""Utilities for splitting route URIs into path segments and rendering them back."""

from __future__ import annotations

from typing import List, Sequence

from route_uri.core.constants import SEPARATOR


def split_segments(raw: str) -> List[str]:
    """
    Split a raw route URI into its non-empty path segments.

    Semantics:
    - The separator is always '/'.
    - Empty tokens (leading, trailing or repeated slashes) are dropped.
    - Tokens made only of whitespace are dropped too; other tokens are kept verbatim.
    """
    return [part for part in (raw or "").split(SEPARATOR) if part.strip()]


def render_segments(segments: Sequence[str], leading_slash: bool = True) -> str:
    """Join segments with '/', prefixing a '/' when leading_slash is set."""
    body = SEPARATOR.join(segments)
    return SEPARATOR + body if leading_slash else body


def starts_with_segments(segments: Sequence[str], prefix: Sequence[str]) -> bool:
    """Return True if prefix is a leading subsequence of segments."""
    if len(prefix) > len(segments):
        return False
    return list(segments[: len(prefix)]) == list(prefix)
