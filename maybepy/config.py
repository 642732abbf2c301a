from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .logger import ConsoleLogger

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARN"
    json_logs: bool = False
    logger_name: str = "maybepy"
    default_error_message: str = "Invalid entity!"
    provider_error_message: str = "Value provider returns null!"

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        base = Settings()
        return replace(
            base,
            log_level=env.get("MAYBEPY_LOG_LEVEL", base.log_level).upper(),
            json_logs=env.get("MAYBEPY_LOG_JSON", "").strip().lower() in _TRUTHY,
        )

    def make_logger(self) -> ConsoleLogger:
        return ConsoleLogger(self.logger_name, level=self.log_level, json_output=self.json_logs)


_settings: Settings = Settings.from_env()
_logger: ConsoleLogger = _settings.make_logger()


def get_settings() -> Settings:
    return _settings


def get_logger() -> ConsoleLogger:
    return _logger


def configure(**overrides: Any) -> Settings:
    """Update process-wide settings; unknown keys raise ``TypeError``."""
    global _settings, _logger
    _settings = replace(_settings, **overrides)
    _logger = _settings.make_logger()
    return _settings


def reset() -> Settings:
    global _settings, _logger
    _settings = Settings.from_env()
    _logger = _settings.make_logger()
    return _settings
