"""Configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """How the input file is read."""

    format: str = Field(default="auto", pattern=r"^(auto|json|jsonl)$")


class AnalysisConfig(BaseModel):
    """Analysis options."""

    owner_login: str | None = Field(
        default=None, description="Override for the username derived from the input"
    )

    @field_validator("owner_login")
    @classmethod
    def validate_owner_login(cls, v: str | None) -> str | None:
        """Treat blank logins as unset."""
        if v is not None and not v.strip():
            return None
        return v


class OutputConfig(BaseModel):
    """Output rendering options."""

    indent: int = Field(default=2, ge=0, le=8)
    text_only: bool = False


class LoggingConfig(BaseModel):
    """Logging options."""

    json_format: bool = False


class Config(BaseModel):
    """Root configuration model."""

    input: InputConfig = Field(default_factory=InputConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Config object. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return Config.model_validate(raw_config or {})
