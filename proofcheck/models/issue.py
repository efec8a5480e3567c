"""Issue records produced by the engine.

``CandidateIssue`` is the mutable working record that flows through the
executor, normaliser and resolver; its offsets are untrusted until
normalised. ``FinalIssue`` is the validated output record and the only type
that leaves the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import IssueCategory, IssueStatus, Severity


@dataclass
class CandidateIssue:
    """A detector finding before (or after) span normalisation."""

    category: IssueCategory
    severity: Severity
    message: str
    claimed_text: str
    suggestion: str
    start: int
    end: int
    explanation: str | None = None
    rule_id: str = ""

    @property
    def length(self) -> int:
        return self.end - self.start


class FinalIssue(BaseModel):
    """Validated issue as returned to callers.

    Serialised with ``to_payload()`` using the wire names ``startIndex`` and
    ``endIndex``. ``rule_id`` stays on the model for reports and logs but is
    not part of the payload.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: IssueCategory
    severity: Severity
    message: str
    explanation: str | None = None
    original_text: str
    suggestion_text: str = ""
    start_index: int = Field(alias="startIndex", ge=0)
    end_index: int = Field(alias="endIndex", ge=0)
    status: IssueStatus = IssueStatus.OPEN
    rule_id: str = Field(default="", exclude=True)

    @field_validator("message", mode="before")
    def _strip_message(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("suggestion_text", mode="before")
    def _default_suggestion(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("explanation", mode="before")
    def _strip_explanation(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value).strip() or None

    @model_validator(mode="after")
    def final_checks(self) -> "FinalIssue":
        if self.end_index < self.start_index:
            raise ValueError("endIndex must not precede startIndex")
        if not self.original_text:
            raise ValueError("original_text must not be empty")
        if len(self.original_text) != self.end_index - self.start_index:
            raise ValueError("original_text length must match the span length")
        if not self.message:
            raise ValueError("message must not be empty")
        return self

    @classmethod
    def from_candidate(cls, candidate: CandidateIssue) -> "FinalIssue":
        return cls(
            type=candidate.category,
            severity=candidate.severity,
            message=candidate.message,
            explanation=candidate.explanation,
            original_text=candidate.claimed_text,
            suggestion_text=candidate.suggestion,
            start_index=candidate.start,
            end_index=candidate.end,
            rule_id=candidate.rule_id,
        )

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True, mode="json")
        if payload.get("explanation") is None:
            payload.pop("explanation", None)
        return payload
