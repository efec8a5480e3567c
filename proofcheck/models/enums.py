"""Enumerations shared by the detection engine and its callers.

Values are the serialised strings used in issue payloads and request
options, so they double as the JSON vocabulary of the engine.
"""

from __future__ import annotations

from enum import Enum


class IssueCategory(str, Enum):
    """Every category an issue can be reported under.

    Declaration order is also the order in which the executor visits
    categories, which makes it part of the tie-break when two issues start
    at the same offset.
    """

    SPELLING = "spelling"
    GRAMMAR = "grammar"
    STYLE = "style"
    TONE = "tone"
    STRUCTURE = "structure"
    PROFESSIONALISM = "professionalism"
    CLARITY = "clarity"
    ACADEMIC_TONE = "academic_tone"
    ACADEMIC_OBJECTIVITY = "academic_objectivity"
    ACADEMIC_HEDGING = "academic_hedging"
    ACADEMIC_CITATION = "academic_citation"
    ACADEMIC_LOGIC = "academic_logic"
    ACADEMIC_STYLE = "academic_style"
    METHODOLOGY = "methodology"
    EVIDENCE = "evidence"
    RESEARCH_QUALITY = "research_quality"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class WritingMode(str, Enum):
    """Writing context that selects wording, severity and detector groups.

    Values:
        GENERAL: everyday proofreading
        ACADEMIC_STANDARD: undergraduate/university writing (alias ``academic``)
        ACADEMIC_RESEARCH: research and PhD level writing
        EMAIL: workplace email, analysed region by region
    """

    GENERAL = "general"
    ACADEMIC_STANDARD = "academic_standard"
    ACADEMIC_RESEARCH = "academic_research"
    EMAIL = "email"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def parse(cls, value: object) -> "WritingMode":
        if isinstance(value, WritingMode):
            return value
        text = str(value or "").strip().lower()
        if not text:
            return cls.GENERAL
        text = _MODE_ALIASES.get(text, text)
        try:
            return cls(text)
        except ValueError as exc:
            raise ValueError(
                f"Invalid writing mode {value!r}; expected one of {cls.all_values()}"
            ) from exc

    @property
    def is_academic(self) -> bool:
        return self in (WritingMode.ACADEMIC_STANDARD, WritingMode.ACADEMIC_RESEARCH)

    @property
    def academic_level(self) -> str:
        if self is WritingMode.ACADEMIC_RESEARCH:
            return "phd"
        if self is WritingMode.ACADEMIC_STANDARD:
            return "standard"
        return "general"


_MODE_ALIASES = {
    "academic": "academic_standard",
}


class IssueStatus(str, Enum):
    """Lifecycle of an emitted issue. The engine only ever emits ``open``."""

    OPEN = "open"
    APPLIED = "applied"
    REJECTED = "rejected"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class RegionName(str, Enum):
    SUBJECT = "subject"
    GREETING = "greeting"
    BODY = "body"
    CLOSING = "closing"
    SIGNATURE = "signature"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class ResearchSection(str, Enum):
    """Paper sections understood by the section-aware research hints."""

    ABSTRACT = "abstract"
    INTRODUCTION = "introduction"
    METHODOLOGY = "methodology"
    RESULTS = "results"
    DISCUSSION = "discussion"
    CONCLUSION = "conclusion"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class EmailPurpose(str, Enum):
    """Purposes with dedicated alignment checks; any other purpose is accepted."""

    GENERAL = "general"
    VACATION_REQUEST = "vacation_request"
    SICK_LEAVE = "sick_leave"
    MEETING_REQUEST = "meeting_request"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
