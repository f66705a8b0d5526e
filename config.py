"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class SimulationConfig:
    """Default simulation settings."""

    default_trials: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_TRIALS", "1000"))
    )
    max_trials: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_MAX_TRIALS", "100000"))
    )
    seed: int | None = field(default_factory=lambda: _parse_optional_int("TWENTY_ONE_SEED"))
    house_strategy: str = field(
        default_factory=lambda: os.getenv("TWENTY_ONE_HOUSE_STRATEGY", "stop_at")
    )
    house_limit: int = field(
        default_factory=lambda: int(os.getenv("TWENTY_ONE_HOUSE_LIMIT", "17"))
    )

    def __post_init__(self) -> None:
        """Validate trial bounds."""
        if self.default_trials < 0:
            raise ValueError("default_trials cannot be negative")
        if self.max_trials < 1:
            raise ValueError("max_trials must be at least 1")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)


# Global configuration instance
config = AppConfig()
