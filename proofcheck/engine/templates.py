"""Message templates keyed by ``(detector_id, mode)``.

Detectors decide *where* an issue is; templates decide how it reads and how
severe it is in each writing mode. A template registered without modes is
the fallback for every mode that has no specific entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from ..models import Severity, WritingMode


@dataclass(frozen=True)
class MessageTemplate:
    """Presentation of one detector in one mode.

    ``message``, ``suggestion`` and ``explanation`` are ``str.format``
    templates rendered with the hit fields (``match``, named groups, ...)
    and the email context fields (``recipient_type``, ``purpose``,
    ``required_tone``).
    """

    message: str
    severity: Severity
    suggestion: str = ""
    explanation: str | None = None

    def render(self, fields: Mapping[str, str]) -> tuple[str, str, str | None]:
        message = self.message.format_map(fields)
        suggestion = self.suggestion.format_map(fields)
        explanation = None
        if self.explanation is not None:
            explanation = self.explanation.format_map(fields)
        return message, suggestion, explanation


class TemplateTable:
    """Lookup of message templates with a per-detector fallback."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, WritingMode | None], MessageTemplate] = {}

    def register(
        self,
        detector_id: str,
        template: MessageTemplate,
        modes: Iterable[WritingMode] | None = None,
    ) -> None:
        keys: list[WritingMode | None] = [None] if modes is None else list(modes)
        for mode in keys:
            key = (detector_id, mode)
            if key in self._entries:
                label = "default" if mode is None else mode.value
                raise ValueError(f"Duplicate template for {detector_id!r} ({label})")
            self._entries[key] = template

    def resolve(self, detector_id: str, mode: WritingMode) -> MessageTemplate:
        template = self._entries.get((detector_id, mode))
        if template is None:
            template = self._entries.get((detector_id, None))
        if template is None:
            raise KeyError(f"No message template for {detector_id!r} in mode {mode.value!r}")
        return template

    def has(self, detector_id: str, mode: WritingMode) -> bool:
        return (detector_id, mode) in self._entries or (detector_id, None) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
