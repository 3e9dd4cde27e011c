"""
Custom exceptions for route-uri.

The URI model itself never raises: invalid input is represented as data.
These exceptions cover the surrounding layers (configuration loading,
routes file access) and let the CLI catch every package error at once.
"""

from typing import Optional


class RouteUriError(Exception):
    """
    Base exception for all route-uri errors.

    Args:
        message: The error message
        details: Additional error details (optional)

    Example:
        >>> try:
        ...     raise RouteUriError("Something went wrong")
        ... except RouteUriError as e:
        ...     logger.error(f"Error: {e}")
    """

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(RouteUriError):
    """
    Raised when there's an error in configuration.

    This includes:
    - Invalid YAML syntax
    - Invalid configuration values

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid dynamic marker",
        ...     "dynamic markers must not contain '/'"
        ... )
    """

    pass


class RoutesFileError(RouteUriError):
    """
    Raised when a routes file cannot be read.

    Example:
        >>> raise RoutesFileError(
        ...     "Routes file not found",
        ...     "No such file: conf/routes"
        ... )
    """

    pass
