"""Configuration models for SparkFX."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for text output",
    )
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class LoaderConfig(BaseModel):
    """Effect-library loading options.

    Immutable: the merge offset is fixed for a whole load session.

    Example:
        >>> config = LoaderConfig(shape_offset=100)
        >>> config.root_element
        'EFFECTS'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    shape_offset: int = Field(
        default=0,
        ge=0,
        description="Added to every shape index so several libraries share one sprite space",
    )
    root_element: str = Field(
        default="EFFECTS", min_length=1, description="Name of the document's root container"
    )


class AppConfig(BaseModel):
    """Application configuration (CLI and embedding applications)."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
