from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_TUTOR_MODEL = "openai:gpt-4o-mini"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(RuntimeError):
    """Raised when mandatory configuration cannot be resolved."""


def _read_first_env_value(names: Iterable[str]) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass(slots=True)
class TutorConfig:
    model: str = DEFAULT_TUTOR_MODEL


@dataclass(slots=True)
class AppConfig:
    logging: LoggingConfig
    tutor: TutorConfig


def check_log_level(level: str) -> str:
    """Return ``level`` upper-cased, or raise if it is not a logging level name."""
    normalised = level.strip().upper()
    if normalised not in LOG_LEVELS:
        raise ConfigurationError(
            "Invalid log level. Expected one of "
            f"{', '.join(LOG_LEVELS)}, got {normalised!r}."
        )
    return normalised


def check_model_name(model: str) -> str:
    """Return ``model`` stripped, or raise unless it reads ``provider:model``."""
    normalised = model.strip()
    provider, _, model_name = normalised.partition(":")
    if not provider or not model_name:
        raise ConfigurationError(
            "Invalid tutor model. Expected 'provider:model', got "
            f"{normalised!r}."
        )
    return normalised


def load_config() -> AppConfig:
    """Load application configuration from environment variables.

    Environment Variables (first non-empty value wins where multiple names are listed):
      - Log level (optional): ``LANG_BASICS_LOG_LEVEL``
      - Log file (optional, stderr when unset): ``LANG_BASICS_LOG_FILE``
      - Tutor model (optional): ``LANG_BASICS_TUTOR_MODEL`` / ``TUTOR_MODEL``
    """

    errors: list[str] = []

    log_level = os.getenv("LANG_BASICS_LOG_LEVEL", "INFO")
    try:
        log_level = check_log_level(log_level)
    except ConfigurationError as exc:
        errors.append(str(exc))

    log_file = os.getenv("LANG_BASICS_LOG_FILE") or None

    tutor_model = _read_first_env_value(["LANG_BASICS_TUTOR_MODEL", "TUTOR_MODEL"])
    try:
        tutor_model = check_model_name(tutor_model or DEFAULT_TUTOR_MODEL)
    except ConfigurationError as exc:
        errors.append(str(exc))

    if errors:
        raise ConfigurationError("; ".join(errors))

    return AppConfig(
        logging=LoggingConfig(level=log_level, file=log_file),
        tutor=TutorConfig(model=tutor_model),
    )
