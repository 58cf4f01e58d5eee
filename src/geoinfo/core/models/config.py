"""Configuration models using Pydantic."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geoinfo.core.models.request import canonical_header_key


class DatabaseConfig(BaseModel):
    """Location database configuration."""

    path: Path = Path("GeoLite2-City.mmdb")


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    structured: bool = False


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEOINFO_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8082, ge=1, le=65535)
    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    ignore_headers: list[str] = []
    ip_header: str | None = None
    cache_size: int = 1024  # <= 0 disables caching
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("ignore_headers")
    @classmethod
    def _uppercase_headers(cls, value: list[str]) -> list[str]:
        return sorted({header.strip().upper() for header in value if header.strip()})

    @field_validator("ip_header")
    @classmethod
    def _canonical_ip_header(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return canonical_header_key(value)

    @property
    def addr(self) -> str:
        """Listen address as ``host:port``."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def ignore_set(self) -> frozenset[str]:
        """Uppercase names of headers hidden from output."""
        return frozenset(self.ignore_headers)

    @classmethod
    def from_file(cls, path: Path | str) -> Config:
        """Load configuration from a YAML or JSON file."""
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open() as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)

        return cls(**data) if data else cls()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump(mode="json")

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to YAML file."""
        import yaml

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
