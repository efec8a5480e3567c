"""Detector definitions and the registry that catalogues them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Match, Pattern
from typing import Callable, Iterable, Iterator, Mapping, Union

from ..models import EmailContext, IssueCategory, RegionName, ResearchSection, WritingMode
from .matching import iter_matches
from .regions import RegionMap
from .templates import MessageTemplate, TemplateTable

ALL_MODES = frozenset(WritingMode)
ACADEMIC_MODES = frozenset({WritingMode.ACADEMIC_STANDARD, WritingMode.ACADEMIC_RESEARCH})
PROOFREADING_MODES = frozenset(
    {WritingMode.GENERAL, WritingMode.ACADEMIC_STANDARD, WritingMode.ACADEMIC_RESEARCH}
)
STANDARD_ONLY = frozenset({WritingMode.ACADEMIC_STANDARD})
RESEARCH_ONLY = frozenset({WritingMode.ACADEMIC_RESEARCH})
EMAIL_ONLY = frozenset({WritingMode.EMAIL})


@dataclass(frozen=True)
class Hit:
    """A detector match with offsets local to the scanned text."""

    start: int
    end: int
    claimed: str = ""
    fields: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ScanContext:
    """Read-only inputs shared by every detector in one call."""

    document: str
    mode: WritingMode
    email: EmailContext = field(default_factory=EmailContext)
    section: ResearchSection | None = None
    regions: RegionMap | None = None

    @property
    def fields(self) -> dict[str, str]:
        return {
            "mode": self.mode.value,
            "recipient_type": self.email.recipient_type,
            "purpose": self.email.purpose,
            "required_tone": self.email.required_tone,
            "section": self.section.value if self.section else "",
            "section_title": self.section.value.title() if self.section else "",
        }


ContextPredicate = Callable[[ScanContext], bool]


class Detector:
    """Base class for rule detectors.

    Subclasses implement ``scan`` which yields ``Hit`` objects for the text
    they are given; the executor translates offsets and renders templates.
    ``gate`` names an extra ``CategoryFlags`` switch that must also be on.
    """

    def __init__(
        self,
        detector_id: str,
        category: IssueCategory,
        *,
        target: RegionName | None = None,
        modes: Iterable[WritingMode] = ALL_MODES,
        mode_categories: Mapping[WritingMode, IssueCategory] | None = None,
        when: ContextPredicate | None = None,
        gate: str | None = None,
    ) -> None:
        self.detector_id = detector_id
        self.category = IssueCategory(category)
        self.target = RegionName(target) if target is not None else None
        self.modes = frozenset(modes)
        self.mode_categories = dict(mode_categories or {})
        self.when = when
        self.gate = gate

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detector_id!r})"

    def applies_to(self, context: ScanContext) -> bool:
        if context.mode not in self.modes:
            return False
        if self.when is not None and not self.when(context):
            return False
        return True

    def category_for(self, mode: WritingMode) -> IssueCategory:
        return self.mode_categories.get(mode, self.category)

    def scan(self, text: str, context: ScanContext) -> Iterator[Hit]:
        raise NotImplementedError


MatchGuard = Callable[[str, Match[str]], bool]


class PatternDetector(Detector):
    """Flag every match of a regular expression.

    ``group`` narrows the flagged span to one capture group, ``guard`` is a
    window predicate that can veto a match without changing its span,
    ``limit`` caps hits per call, ``scan_limit`` only scans a prefix of the
    text, ``min_length`` skips short matches and ``max_span`` truncates long
    ones. ``extra_fields`` adds template fields computed from the match.
    ``claim`` lets the detector report its own idea of the matched
    text; the normaliser corrects it when it disagrees with the document.
    """

    def __init__(
        self,
        detector_id: str,
        category: IssueCategory,
        pattern: str | Pattern[str],
        *,
        flags: int = re.IGNORECASE,
        group: int | str = 0,
        guard: MatchGuard | None = None,
        limit: int | None = None,
        scan_limit: int | None = None,
        min_length: int = 0,
        max_span: int | None = None,
        claim: Callable[[Match[str]], str] | None = None,
        extra_fields: Callable[[Match[str]], Mapping[str, str]] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(detector_id, category, **kwargs)
        self.pattern = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        self.group = group
        self.guard = guard
        self.limit = limit
        self.scan_limit = scan_limit
        self.min_length = min_length
        self.max_span = max_span
        self.claim = claim
        self.extra_fields = extra_fields

    def scan(self, text: str, context: ScanContext) -> Iterator[Hit]:
        emitted = 0
        for match in iter_matches(self.pattern, text, 0, self.scan_limit):
            if len(match.group(0)) < self.min_length:
                continue
            if self.guard is not None and not self.guard(text, match):
                continue
            start, end = match.span(self.group)
            if start < 0:
                continue
            if self.max_span is not None:
                end = min(end, start + self.max_span)
            fields = {"match": text[start:end], "full_match": match.group(0)}
            fields.update(
                {name: value for name, value in match.groupdict().items() if value is not None}
            )
            if self.extra_fields is not None:
                fields.update(self.extra_fields(match))
            claimed = self.claim(match) if self.claim is not None else text[start:end]
            yield Hit(start=start, end=end, claimed=claimed, fields=fields)
            emitted += 1
            if self.limit is not None and emitted >= self.limit:
                return


ScanFunction = Callable[[str, ScanContext], Iterable[Hit]]


class FunctionDetector(Detector):
    """Wrap a plain function for checks that are not a single regex."""

    def __init__(
        self,
        detector_id: str,
        category: IssueCategory,
        func: ScanFunction,
        **kwargs,
    ) -> None:
        super().__init__(detector_id, category, **kwargs)
        self.func = func

    def scan(self, text: str, context: ScanContext) -> Iterator[Hit]:
        yield from self.func(text, context)


TemplateKey = Union[WritingMode, Iterable[WritingMode], None]


class DetectorRegistry:
    """Ordered catalogue of detectors plus their message templates.

    Registration order is significant: within a category, detectors run in
    the order they were added, and that order breaks ties between issues
    that start at the same offset.
    """

    def __init__(self) -> None:
        self._detectors: list[Detector] = []
        self._by_id: dict[str, Detector] = {}
        self.templates = TemplateTable()

    def add(
        self,
        detector: Detector,
        templates: Mapping[TemplateKey, MessageTemplate],
    ) -> Detector:
        if detector.detector_id in self._by_id:
            raise ValueError(f"Duplicate detector id {detector.detector_id!r}")
        if not templates:
            raise ValueError(f"Detector {detector.detector_id!r} has no templates")
        for key, template in templates.items():
            if key is None:
                modes = None
            elif isinstance(key, WritingMode):
                modes = [key]
            else:
                modes = list(key)
            self.templates.register(detector.detector_id, template, modes)
        self._detectors.append(detector)
        self._by_id[detector.detector_id] = detector
        return detector

    def get(self, detector_id: str) -> Detector:
        return self._by_id[detector_id]

    def detectors_for(self, category: IssueCategory, mode: WritingMode) -> list[Detector]:
        return [
            detector
            for detector in self._detectors
            if mode in detector.modes and detector.category_for(mode) is category
        ]

    def categories_for(self, mode: WritingMode) -> set[IssueCategory]:
        return {
            detector.category_for(mode)
            for detector in self._detectors
            if mode in detector.modes
        }

    def missing_templates(self) -> list[tuple[str, WritingMode]]:
        """Return ``(detector_id, mode)`` pairs that would fail to render."""

        missing: list[tuple[str, WritingMode]] = []
        for detector in self._detectors:
            for mode in WritingMode:
                if mode in detector.modes and not self.templates.has(detector.detector_id, mode):
                    missing.append((detector.detector_id, mode))
        return missing

    def __iter__(self) -> Iterator[Detector]:
        return iter(self._detectors)

    def __len__(self) -> int:
        return len(self._detectors)

    def __contains__(self, detector_id: object) -> bool:
        return detector_id in self._by_id
