"""Runtime settings read from the environment (optionally via a ``.env`` file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .engine.apply import DEFAULT_PAGE_SIZE
from .engine.pipeline import MIN_DOCUMENT_LENGTH
from .engine.validator import MAX_ISSUES
from .models import WritingMode

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "PROOFCHECK_"


@dataclass(frozen=True)
class Settings:
    max_issues: int = MAX_ISSUES
    min_length: int = MIN_DOCUMENT_LENGTH
    default_mode: WritingMode = WritingMode.GENERAL
    log_level: str = "INFO"
    page_size: int = DEFAULT_PAGE_SIZE
    language: str = "en-GB"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from exc


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Load settings, reading ``dotenv_path`` (or a local ``.env``) first.

    Values already present in the environment are not overridden by the
    dotenv file.
    """

    if dotenv_path is not None:
        load_dotenv(dotenv_path=Path(dotenv_path))
    else:
        load_dotenv()

    settings = Settings(
        max_issues=_env_int(f"{ENV_PREFIX}MAX_ISSUES", MAX_ISSUES),
        min_length=_env_int(f"{ENV_PREFIX}MIN_LENGTH", MIN_DOCUMENT_LENGTH),
        default_mode=WritingMode.parse(_env_str(f"{ENV_PREFIX}DEFAULT_MODE", "general")),
        log_level=_env_str(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
        page_size=_env_int(f"{ENV_PREFIX}PAGE_SIZE", DEFAULT_PAGE_SIZE),
        language=_env_str(f"{ENV_PREFIX}LANGUAGE", "en-GB"),
    )
    LOGGER.debug("Loaded settings: %s", settings)
    return settings
