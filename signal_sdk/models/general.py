"""Pydantic models for service information and global configuration."""

from pydantic import BaseModel, Field


class About(BaseModel):
    """Build and capability information reported by ``/v1/about``."""

    build: int | None = None
    mode: str | None = None
    version: str | None = None
    versions: list[str] = Field(default_factory=list)
    capabilities: dict[str, list[str]] = Field(default_factory=dict)

    model_config = {"extra": "allow"}


class LoggingConfiguration(BaseModel):
    level: str | None = None


class Configuration(BaseModel):
    """Global service configuration, readable and writable."""

    logging: LoggingConfiguration | None = None

    model_config = {"extra": "allow"}


class TrustModeRequest(BaseModel):
    """Per-account trust mode, e.g. 'on-first-use', 'always' or 'never'."""

    trust_mode: str


class TrustModeResponse(BaseModel):
    trust_mode: str | None = None

    model_config = {"extra": "allow"}
