"""Configuration for the padding codec.

Configuration is read from ``paddy.yaml``::

    values_separator: " "
    expression_separator: ";"
    fit_token: "x"
    default_padding: "10 20"

Every key is optional; a missing file yields the defaults.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .padding.codec import (
    DEFAULT_EXPRESSION_SEPARATOR,
    DEFAULT_FIT_TOKEN,
    DEFAULT_PADDING,
    DEFAULT_VALUES_SEPARATOR,
    PaddingCodec,
)
from .padding.model import Padding

DEFAULT_CONFIG_PATH = Path("paddy.yaml")


class PaddyConfigError(ValueError):
    """Raised when the configuration file is invalid."""


class PaddyConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    values_separator: str = Field(DEFAULT_VALUES_SEPARATOR, min_length=1)
    expression_separator: str = Field(DEFAULT_EXPRESSION_SEPARATOR, min_length=1)
    fit_token: str = Field(DEFAULT_FIT_TOKEN, min_length=1)
    default_padding: str = DEFAULT_PADDING

    @model_validator(mode="after")
    def _check_separators(self) -> PaddyConfig:
        if self.values_separator == self.expression_separator:
            raise ValueError("values_separator and expression_separator must differ")
        if any(char.isspace() for char in self.expression_separator):
            # Condition expressions are stripped of whitespace before clauses are split.
            raise ValueError("expression_separator must not contain whitespace")
        if self.values_separator in self.fit_token or self.expression_separator in self.fit_token:
            raise ValueError("fit_token must not contain a separator")
        return self

    def codec(self) -> PaddingCodec:
        """Build a codec using the configured separators."""
        return PaddingCodec(
            values_separator=self.values_separator,
            expression_separator=self.expression_separator,
            fit_token=self.fit_token,
        )

    def default(self) -> Padding:
        """Decode the configured default padding (zero padding if empty)."""
        return self.codec().decode(self.default_padding) or Padding()


def load_config(config_path: Path | None = None) -> PaddyConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the config file. Defaults to ``paddy.yaml`` in
            the current working directory.

    Returns:
        PaddyConfig with file values over defaults.

    Raises:
        PaddyConfigError: If the file is not valid YAML, not a mapping, or
            holds invalid values.
    """
    path = config_path or (Path.cwd() / DEFAULT_CONFIG_PATH)
    if not path.exists():
        return PaddyConfig()

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PaddyConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return PaddyConfig()
    if not isinstance(data, dict):
        raise PaddyConfigError(f"Config must be a mapping, got {type(data).__name__}")

    try:
        return PaddyConfig.model_validate(data)
    except ValidationError as e:
        raise PaddyConfigError(f"Invalid config in {path}: {e}") from e
