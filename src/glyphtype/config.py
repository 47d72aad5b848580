"""Configuration model and TOML loader for glyphtype."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any, Self

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from glyphtype.atomic import atomic_write
from glyphtype.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_TABLE = "animation"


class ConfigurationError(ValueError):
    """Raised when animation settings are missing, malformed, or out of order."""


class AnimationConfig(BaseModel):
    """Every tunable parameter of one animation run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_delay: float = Field(default=20.0, ge=0, description="Nominal ms between characters")
    jitter: float = Field(default=0.6, ge=0, description="Relative random spread of every delay")
    keyboard_influence: float = Field(
        default=0.8, ge=0, description="Scales the keyboard-distance contribution"
    )
    key_delay: float = Field(default=20.0, ge=0, description="ms per unit of key distance")
    braille_ahead: int = Field(default=16, ge=0, description="Longest shimmer window")
    min_braille_ahead: int = Field(default=2, ge=0, description="Shortest shimmer window")
    overshoot: int = Field(
        default=20, ge=0, description="Decorative glyphs appended after the last line"
    )
    min_contraction_delay: int = Field(default=10, ge=0)
    max_contraction_delay: int = Field(default=40, ge=0)
    min_acceleration_multiplier: float = Field(default=0.0, ge=0)
    max_acceleration_multiplier: float = Field(default=0.8, ge=0)
    quantize_acceleration: bool = Field(
        default=False, description="Draw the acceleration multiplier as an integer"
    )
    min_brightness: int = Field(default=0, ge=0, le=255)
    max_brightness: int = Field(default=255, ge=0, le=255)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(_format_errors(exc)) from exc

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        pairs = (
            ("min_braille_ahead", "braille_ahead"),
            ("min_contraction_delay", "max_contraction_delay"),
            ("min_acceleration_multiplier", "max_acceleration_multiplier"),
            ("min_brightness", "max_brightness"),
        )
        for low, high in pairs:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self

    @property
    def easing_enabled(self) -> bool:
        return not (
            self.min_acceleration_multiplier == 0 and self.max_acceleration_multiplier == 0
        )

    @classmethod
    def from_options(cls, **options: Any) -> AnimationConfig:
        """Build a config, converting validation failures to ConfigurationError."""
        try:
            return cls.model_validate(options)
        except ValidationError as exc:
            raise ConfigurationError(_format_errors(exc)) from exc

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> AnimationConfig:
        """Load the [animation] table from a TOML file, or use defaults.

        Keyword overrides win over values read from the file.
        """
        if config_path is None:
            config_path = get_config_path()

        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    document = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(f"{config_path}: {exc}") from exc
            table = document.get(CONFIG_TABLE, {})
            if not isinstance(table, dict):
                raise ConfigurationError(f"{config_path}: [{CONFIG_TABLE}] must be a table")
            data.update(table)

        data.update(overrides)
        return cls.from_options(**data)

    def with_overrides(self, **overrides: Any) -> AnimationConfig:
        """Return a validated copy with some fields replaced."""
        return self.from_options(**{**self.model_dump(), **overrides})

    def to_toml(self) -> str:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("glyphtype animation settings"))
        table = tomlkit.table()
        for key, value in self.model_dump().items():
            table[key] = value
        doc[CONFIG_TABLE] = table
        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Serialize the config to a TOML file (created if missing)."""
        atomic_write(path, self.to_toml())


def _format_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        message = error["msg"]
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


__all__ = ["CONFIG_TABLE", "AnimationConfig", "ConfigurationError"]
