"""Request options for a single analysis call.

``CategoryFlags`` lists every recognised category explicitly; unknown keys
are rejected by pydantic instead of being silently ignored.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import IssueCategory, ResearchSection, WritingMode

GATE_FLAGS = ("purpose",)
FLAG_NAMES = IssueCategory.all_values() + list(GATE_FLAGS)


def _flag_name(name: IssueCategory | str) -> str:
    if isinstance(name, IssueCategory):
        return name.value
    if name in GATE_FLAGS:
        return name
    return IssueCategory(name).value


class CategoryFlags(BaseModel):
    """One switch per issue category, all enabled by default."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    spelling: bool = True
    grammar: bool = True
    style: bool = True
    tone: bool = True
    structure: bool = True
    professionalism: bool = True
    clarity: bool = True
    academic_tone: bool = True
    academic_objectivity: bool = True
    academic_hedging: bool = True
    academic_citation: bool = True
    academic_logic: bool = True
    academic_style: bool = True
    methodology: bool = True
    evidence: bool = True
    research_quality: bool = True
    # Not a category: gates the purpose-specific structure checks (date
    # range, meeting time), which still report as ``structure``.
    purpose: bool = True

    def is_enabled(self, category: IssueCategory | str) -> bool:
        return bool(getattr(self, IssueCategory(category).value))

    def allows(self, gate: str | None) -> bool:
        """Whether a detector with the extra ``gate`` switch may run."""

        return gate is None or bool(getattr(self, _flag_name(gate)))

    def enabled(self) -> list[IssueCategory]:
        """Enabled categories in executor order."""

        return [category for category in IssueCategory if self.is_enabled(category)]

    @classmethod
    def only(cls, categories: Iterable[IssueCategory | str]) -> "CategoryFlags":
        """Enable exactly the named switches; gate switches not named are off."""

        wanted = {_flag_name(name) for name in categories}
        return cls(**{name: name in wanted for name in FLAG_NAMES})

    def without(self, categories: Iterable[IssueCategory | str]) -> "CategoryFlags":
        update = {_flag_name(name): False for name in categories}
        return self.model_copy(update=update)


class EmailContext(BaseModel):
    """Recipient, purpose and tone supplied with email-mode requests."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    recipient_type: str = "Manager"
    purpose: str = "general"
    required_tone: str = Field(default="Professional", alias="tone")

    @field_validator("recipient_type", mode="before")
    def _default_recipient(cls, value: object) -> str:
        return str(value or "").strip() or "Manager"

    @field_validator("purpose", mode="before")
    def _normalise_purpose(cls, value: object) -> str:
        return str(value or "").strip().lower() or "general"

    @field_validator("required_tone", mode="before")
    def _default_tone(cls, value: object) -> str:
        return str(value or "").strip() or "Professional"


class AnalysisRequest(BaseModel):
    """Everything one analysis call needs.

    ``regions_needed`` left as ``None`` means "only for email mode".
    """

    model_config = ConfigDict(extra="forbid")

    document: str
    mode: WritingMode = WritingMode.GENERAL
    categories: CategoryFlags = Field(default_factory=CategoryFlags)
    regions_needed: bool | None = None
    email: EmailContext = Field(default_factory=EmailContext)
    section: ResearchSection | None = None

    @field_validator("mode", mode="before")
    def _parse_mode(cls, value: object) -> WritingMode:
        return WritingMode.parse(value)

    @field_validator("categories", mode="before")
    def _default_categories(cls, value: object) -> object:
        if value is None:
            return CategoryFlags()
        return value

    @field_validator("email", mode="before")
    def _default_email(cls, value: object) -> object:
        if value is None:
            return EmailContext()
        return value

    @field_validator("section", mode="before")
    def _normalise_section(cls, value: object) -> str | None:
        if value is None:
            return None
        if isinstance(value, ResearchSection):
            return value.value
        return str(value).strip().lower() or None

    def wants_regions(self) -> bool:
        if self.regions_needed is None:
            return self.mode is WritingMode.EMAIL
        return self.regions_needed
