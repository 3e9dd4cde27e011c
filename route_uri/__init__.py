"""
route_uri - URI model for route configuration files
===================================================

Parses the URIs of a Play-style routes file into path segments and
provides the operations an editor needs on top of them: prefix matching,
completion candidates and selection-to-segment resolution.

Main Components:
    - core: Configuration, constants, exceptions and segment helpers
    - uri: The RouteUri value
    - located: URIs with a document location
    - routes_file: Routes file scanning
    - completion: Completion candidates and cursor resolution

Example:
    >>> from route_uri import RouteUri
    >>>
    >>> uri = RouteUri("/users/:id")
    >>> uri.parts_touched_by(7, 3)
    (['users'], [':id'])

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

from route_uri.core.config import AppConfig
from route_uri.core.exceptions import RouteUriError
from route_uri.located import LocatedUri, UriSpan
from route_uri.uri import RouteUri

__all__ = [
    "AppConfig",
    "LocatedUri",
    "RouteUri",
    "RouteUriError",
    "UriSpan",
    "__version__",
]
