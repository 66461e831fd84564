"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PATHFINDER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "NYC Pathfinder API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted run outputs.")
    two_opt_iterations: int = Field(
        default=100,
        ge=0,
        description="Maximum number of 2-opt outer iterations per solve.",
    )
    max_pins: int = Field(default=15, ge=2, description="Maximum number of pins accepted for a single solve.")
    map_center: tuple[float, ...] = Field(default=(40.7128, -74.0060))
    initial_zoom: int = Field(default=12, ge=0)
    min_zoom: int = Field(default=10, ge=0)
    max_zoom: int = Field(default=18, ge=0)
    map_bounds: tuple[float, ...] = Field(
        default=(40.4774, -74.2591, 40.9176, -73.7004),
        description="South-west latitude/longitude followed by north-east latitude/longitude.",
    )
    show_animation: bool = True
    animation_delay_ms: int = Field(default=100, ge=0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("map_center", "map_bounds", mode="before")
    @classmethod
    def _parse_float_tuple_from_env(cls, value: Any) -> tuple[float, ...]:
        """Parse float tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return tuple(float(item) for item in value)
        if isinstance(value, list):
            return tuple(float(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(float(item) for item in parsed)
            except (json.JSONDecodeError, TypeError, ValueError):
                pass
            return tuple(float(item.strip()) for item in value.split(",") if item.strip())
        return tuple()

    @field_validator("map_center")
    @classmethod
    def _check_center(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if len(value) != 2:
            raise ValueError("map_center must contain a latitude and a longitude.")
        return value

    @field_validator("map_bounds")
    @classmethod
    def _check_bounds(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if len(value) != 4:
            raise ValueError("map_bounds must contain south-west and north-east latitude/longitude pairs.")
        return value


settings = Settings()
