"""LanguageTool as an optional candidate source.

LanguageTool matches are converted into ``CandidateIssue`` objects so they
flow through the same normalisation, conflict resolution and validation as
the built-in detectors. The tool is slow to start and talks to a local Java
server, so calls are retried with exponential backoff on transient errors.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Iterable

import language_tool_python
from language_tool_python.utils import LanguageToolError

from ..models import CandidateIssue, IssueCategory, Severity
from .language_tool_config import DEFAULT_DISABLED_RULES, DEFAULT_IGNORED_WORDS

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-GB"
DEFAULT_MESSAGE = "Possible language issue"

# Default LanguageTool server configuration. The stock maxCheckTimeMillis is
# low enough that the server aborts checks on multi-page documents.
_DEFAULT_CONFIG = {
    "requestLimitPeriodInSeconds": 60,
    "maxCheckTimeMillis": 120000,
}

# Transient errors that should trigger a retry. language_tool_python wraps
# connection-level failures of its local server in LanguageToolError.
TRANSIENT_ERRORS = (
    ConnectionError,
    TimeoutError,
    OSError,
    LanguageToolError,
)

ISSUE_TYPE_CATEGORIES = {
    "misspelling": IssueCategory.SPELLING,
    "grammar": IssueCategory.GRAMMAR,
    "typographical": IssueCategory.GRAMMAR,
    "style": IssueCategory.STYLE,
    "register": IssueCategory.STYLE,
}

ISSUE_TYPE_SEVERITIES = {
    "misspelling": Severity.MODERATE,
    "grammar": Severity.MODERATE,
    "typographical": Severity.LOW,
    "style": Severity.LOW,
    "register": Severity.LOW,
}


def _retry_with_backoff(
    func: Any,
    func_arg: Any,
    max_retries: int = 3,
    base_delay: float = 3.0,
    max_delay: float = 60.0,
) -> Any:
    """Call ``func(func_arg)`` retrying transient errors with exponential backoff.

    Args:
            func: The function to call (e.g., tool.check)
            func_arg: The argument to pass to func (e.g., text)
            max_retries: Maximum number of retry attempts (total attempts = max_retries + 1)
            base_delay: Initial delay in seconds
            max_delay: Maximum delay in seconds

    Returns:
            The return value of func

    Raises:
            The last exception if all retries fail
    """

    for attempt in range(max_retries + 1):
        try:
            return func(func_arg)
        except TRANSIENT_ERRORS as exc:
            if attempt >= max_retries:
                LOGGER.error(
                    "Language check failed after %d attempt(s): %s",
                    attempt + 1,
                    exc,
                )
                raise

            delay = base_delay * (2**attempt)
            delay = min(delay * random.uniform(0.75, 1.25), max_delay)
            LOGGER.warning(
                "Language check attempt %d failed (transient error: %s); "
                "retrying in %.1f second(s)...",
                attempt + 1,
                type(exc).__name__,
                delay,
            )
            time.sleep(delay)

    raise RuntimeError("Retry logic completed without returning or raising")


def _filter_matches(matches: Iterable[Any], words_to_ignore: set[str]) -> list[Any]:
    """Drop matches whose text is an ignored word or an ignored acronym."""

    if not words_to_ignore:
        return list(matches)

    filtered: list[Any] = []
    for match in matches:
        original_text = str(getattr(match, "matchedText", "") or "").strip()
        if original_text:
            letters = "".join(ch for ch in original_text if ch.isalpha())
            is_acronym_form = bool(letters) and (
                letters.isupper() or letters.rstrip("s").isupper()
            )
            if is_acronym_form:
                if letters in words_to_ignore or letters.rstrip("s") in words_to_ignore:
                    continue
            elif original_text in words_to_ignore:
                continue
        filtered.append(match)
    return filtered


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return default


def match_to_candidate(match: Any, document: str) -> CandidateIssue:
    """Convert one LanguageTool match into a candidate issue."""

    rule_id = getattr(match, "ruleId", "UNKNOWN") or "UNKNOWN"
    issue_type = str(getattr(match, "ruleIssueType", "") or "").lower()
    offset = _as_int(getattr(match, "offset", 0))
    length = _as_int(getattr(match, "errorLength", 0))
    replacements = list(getattr(match, "replacements", []) or [])
    message = str(getattr(match, "message", "") or "").strip() or DEFAULT_MESSAGE
    claimed = str(getattr(match, "matchedText", "") or "") or document[offset : offset + length]

    return CandidateIssue(
        category=ISSUE_TYPE_CATEGORIES.get(issue_type, IssueCategory.CLARITY),
        severity=ISSUE_TYPE_SEVERITIES.get(issue_type, Severity.LOW),
        message=message,
        claimed_text=claimed,
        suggestion=str(replacements[0]) if replacements else "",
        start=offset,
        end=offset + length,
        rule_id=f"languagetool.{rule_id}",
    )


class LanguageToolManager:
    """Factory class responsible for configuring LanguageTool instances."""

    def __init__(
        self,
        *,
        ignored_words: Iterable[str] | None = None,
        disabled_rules: Iterable[str] | None = None,
        base_language: str = DEFAULT_LANGUAGE,
        config: dict[str, Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_language = base_language
        self.logger = logger or LOGGER
        self.config = dict(config) if config is not None else dict(_DEFAULT_CONFIG)
        self.disabled_rules = set(DEFAULT_DISABLED_RULES) | set(disabled_rules or [])
        self.ignored_words = self._prepare_ignored_words(
            set(DEFAULT_IGNORED_WORDS) | set(ignored_words or [])
        )

    @staticmethod
    def _prepare_ignored_words(words: Iterable[str]) -> tuple[str, ...]:
        cleaned = {word.strip() for word in words if word and word.strip()}
        return tuple(sorted(cleaned))

    def build_tool(self, language: str | None = None) -> Any:
        """Build a LanguageTool instance for ``language`` (default: base language)."""

        language = language or self.base_language
        kwargs: dict[str, Any] = {}
        if self.config:
            kwargs["config"] = self.config
        if self.ignored_words and language == self.base_language:
            self.logger.info(
                "Registering %d custom spellings with LanguageTool",
                len(self.ignored_words),
            )
            kwargs["newSpellings"] = list(self.ignored_words)
            kwargs["new_spellings_persist"] = False

        tool = language_tool_python.LanguageTool(language, **kwargs)
        if self.disabled_rules:
            tool.disabled_rules = set(self.disabled_rules)
        return tool


class LanguageToolSource:
    """External candidate source backed by a LanguageTool instance.

    The tool is built on first use so constructing the source is cheap; pass
    ``tool`` to reuse an existing instance (or a test double).
    """

    def __init__(
        self,
        tool: Any | None = None,
        *,
        manager: LanguageToolManager | None = None,
        language: str | None = None,
        max_retries: int = 3,
        base_delay: float = 3.0,
    ) -> None:
        self.manager = manager or LanguageToolManager()
        self.language = language or self.manager.base_language
        self.max_retries = max_retries
        self.base_delay = base_delay
        self._tool = tool

    @property
    def tool(self) -> Any:
        if self._tool is None:
            LOGGER.info("Starting LanguageTool (%s)", self.language)
            self._tool = self.manager.build_tool(self.language)
        return self._tool

    def collect(self, document: str) -> list[CandidateIssue]:
        """Check ``document`` and return its matches as candidate issues.

        Transient failures are retried; the last error is re-raised once the
        retries are exhausted.
        """

        matches = _retry_with_backoff(
            self.tool.check,
            document,
            max_retries=self.max_retries,
            base_delay=self.base_delay,
        )
        kept = _filter_matches(matches or [], set(self.manager.ignored_words))
        LOGGER.debug(
            "LanguageTool returned %d match(es), %d after filtering",
            len(matches or []),
            len(kept),
        )
        return [match_to_candidate(match, document) for match in kept]

    def close(self) -> None:
        if self._tool is not None and hasattr(self._tool, "close"):
            self._tool.close()
        self._tool = None
