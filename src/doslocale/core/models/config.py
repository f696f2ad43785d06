"""Configuration models using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from doslocale.core.interfaces.locale_source import ILocaleSource


class DetectionConfig(BaseModel):
    """Host locale detection configuration."""

    source: Literal["setlocale", "environment"] = "setlocale"

    # Forced locale identifiers, e.g. "de_DE.UTF-8"
    locale: str | None = None  # every category
    numeric: str | None = None
    time: str | None = None
    monetary: str | None = None

    @property
    def has_overrides(self) -> bool:
        return any((self.locale, self.numeric, self.time, self.monetary))


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DOSLOCALE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    logs: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> Config:
        """Load configuration from YAML file."""
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open() as f:
            data = yaml.safe_load(f)

        return cls(**data) if data else cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()

    def build_source(self) -> ILocaleSource:
        """Create the locale source described by the detection settings."""
        from doslocale.core.locale.source import (
            EnvironmentLocaleSource,
            SetlocaleLocaleSource,
            StaticLocaleSource,
        )
        from doslocale.core.models.locale import LocaleCategory

        detection = self.detection
        source: ILocaleSource
        if detection.source == "environment":
            source = EnvironmentLocaleSource()
        else:
            source = SetlocaleLocaleSource()

        if not detection.has_overrides:
            return source

        values = {
            category: value
            for category, value in (
                (LocaleCategory.NUMERIC, detection.numeric),
                (LocaleCategory.TIME, detection.time),
                (LocaleCategory.MONETARY, detection.monetary),
            )
            if value
        }
        return StaticLocaleSource(values, default=detection.locale, fallback=source)
