"""Environment driven settings for the jsonindex command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
import logging
import os

LOG_LEVEL_ENV = "JSONINDEX_LOG_LEVEL"
JSON_INDENT_ENV = "JSONINDEX_JSON_INDENT"

VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

_DEFAULT_JSON_INDENT = 2


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    json_indent: int | None = _DEFAULT_JSON_INDENT


def _parse_log_level(raw: str | None) -> int:
    if not raw or not raw.strip():
        return logging.INFO
    text = raw.strip().upper()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    if not isinstance(level, int):
        raise ValueError(f"Invalid {LOG_LEVEL_ENV} value: {raw!r}")
    return level


def _parse_indent(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return _DEFAULT_JSON_INDENT
    try:
        indent = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {JSON_INDENT_ENV} value: {raw!r}") from exc
    if indent < 0:
        raise ValueError(f"{JSON_INDENT_ENV} must not be negative, got {indent}")
    return indent or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_log_level(env.get(LOG_LEVEL_ENV)),
        json_indent=_parse_indent(env.get(JSON_INDENT_ENV)),
    )
