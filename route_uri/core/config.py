"""
Configuration management with Pydantic validation.

This module provides the strongly-typed settings that drive routes-file
scanning and completion.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from route_uri.core.constants import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_HTTP_METHODS,
    DYNAMIC_MARKERS,
    ENV_MAX_CANDIDATES,
    SEPARATOR,
)
from route_uri.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """
    Main application configuration.

    Attributes:
        dynamic_markers: Segment markers offered as dynamic completions
        http_methods: Methods recognized at the start of a route line
        comment_prefix: Prefix of comment lines in a routes file
        offer_dynamic_segments: Whether completions include dynamic segments
        max_candidates: Maximum number of completion candidates (None for no limit)

    Example:
        >>> config = AppConfig.from_yaml("route-uri.yaml")
        >>> engine = CompletionEngine(known_uris, config)
    """

    dynamic_markers: List[str] = Field(
        default_factory=lambda: list(DYNAMIC_MARKERS), description="Dynamic segment markers"
    )
    http_methods: List[str] = Field(
        default_factory=lambda: list(DEFAULT_HTTP_METHODS), description="Route line methods"
    )
    comment_prefix: str = Field(default=DEFAULT_COMMENT_PREFIX, description="Comment prefix")
    offer_dynamic_segments: bool = Field(
        default=True, description="Offer dynamic segments as completions"
    )
    max_candidates: Optional[int] = Field(
        default=None, ge=1, description="Maximum number of completion candidates"
    )

    # Internal fields
    _source_path: Optional[Path] = None

    @field_validator("dynamic_markers")
    @classmethod
    def validate_dynamic_markers(cls, v: List[str]) -> List[str]:
        """Validate dynamic markers."""
        for marker in v:
            if not marker or not marker.strip():
                raise ValueError("dynamic markers cannot be empty")
            if SEPARATOR in marker:
                raise ValueError(f"dynamic markers must not contain '{SEPARATOR}': {marker!r}")
        return v

    @field_validator("http_methods")
    @classmethod
    def validate_http_methods(cls, v: List[str]) -> List[str]:
        """Normalize methods to upper case."""
        methods = [m.strip().upper() for m in v if m and m.strip()]
        if not methods:
            raise ValueError("http_methods cannot be empty")
        return methods

    @field_validator("comment_prefix")
    @classmethod
    def validate_comment_prefix(cls, v: str) -> str:
        """Validate comment prefix."""
        v = v.strip()
        if not v:
            raise ValueError("comment_prefix cannot be empty")
        return v

    def __init__(self, **data: Any):
        # Applied on construction only, so the value goes through field validation
        override = os.environ.get(ENV_MAX_CANDIDATES)
        if override:
            data["max_candidates"] = override
        super().__init__(**data)

    @classmethod
    def from_defaults(cls) -> "AppConfig":
        """
        Build the default configuration, honoring environment overrides.

        Raises:
            ConfigurationError: If an environment override is invalid
        """
        try:
            return cls()
        except ValueError as e:
            raise ConfigurationError("Invalid configuration", str(e))

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration YAML file

        Returns:
            Validated AppConfig instance

        Raises:
            ConfigurationError: If config file is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML syntax in configuration file", str(e))
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {config_path}", str(e))

        # An empty file means "all defaults"
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        try:
            config = cls(**data)
        except ValueError as e:
            raise ConfigurationError("Invalid configuration", str(e))

        config._source_path = config_path.absolute()
        logger.debug(f"Loaded configuration from {config._source_path}")
        return config

    @property
    def source_path(self) -> Optional[Path]:
        """Path the configuration was loaded from, if any."""
        return self._source_path

    def to_yaml(self, output_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            output_path: Path to save configuration
        """
        output_path = Path(output_path)
        data = self.model_dump()

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration to {output_path}", str(e))

    class Config:
        """Pydantic configuration."""

        validate_assignment = True
