from __future__ import annotations

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from .units import Resolution

load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_resolution(name: str, default: str) -> Resolution:
    value = os.getenv(name) or default
    try:
        return Resolution.from_name(value)
    except ValueError:
        raise ValueError(f"Invalid resolution for {name}: {value}")


@dataclass(slots=True)
class LoggingConfig:
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    timezone: str = field(default_factory=lambda: os.getenv("TZ", "UTC"))
    json: bool = field(default_factory=lambda: _get_bool("CHRONOPARSE_JSON_LOGS", True))


@dataclass(slots=True)
class ParserConfig:
    resolution: Resolution


@dataclass(slots=True)
class AppConfig:
    logging: LoggingConfig
    parser: ParserConfig


def load_config() -> AppConfig:
    return AppConfig(
        logging=LoggingConfig(),
        parser=ParserConfig(resolution=_get_resolution("CHRONOPARSE_RESOLUTION", "ns")),
    )
