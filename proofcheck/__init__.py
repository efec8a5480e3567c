"""Rule-based proofreading engine.

Importing the package is cheap; the engine, rules and models are loaded on
first attribute access so callers can write ``from proofcheck import
analyze_document``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .engine.apply import apply_issue, document_stats
    from .engine.pipeline import AnalysisResult, analyze, analyze_document, ensure_analyzable
    from .errors import DocumentRejectedError, IssueStateError, ProofcheckError
    from .models import (
        AnalysisRequest,
        CandidateIssue,
        CategoryFlags,
        EmailContext,
        FinalIssue,
        IssueCategory,
        IssueStatus,
        ResearchSection,
        Severity,
        WritingMode,
    )

__version__ = "0.1.0"

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "CandidateIssue",
    "CategoryFlags",
    "DocumentRejectedError",
    "EmailContext",
    "FinalIssue",
    "IssueCategory",
    "IssueStateError",
    "IssueStatus",
    "ProofcheckError",
    "ResearchSection",
    "Severity",
    "WritingMode",
    "analyze",
    "analyze_document",
    "apply_issue",
    "document_stats",
    "ensure_analyzable",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "AnalysisResult": (".engine.pipeline", "AnalysisResult"),
    "analyze": (".engine.pipeline", "analyze"),
    "analyze_document": (".engine.pipeline", "analyze_document"),
    "ensure_analyzable": (".engine.pipeline", "ensure_analyzable"),
    "apply_issue": (".engine.apply", "apply_issue"),
    "document_stats": (".engine.apply", "document_stats"),
    "DocumentRejectedError": (".errors", "DocumentRejectedError"),
    "IssueStateError": (".errors", "IssueStateError"),
    "ProofcheckError": (".errors", "ProofcheckError"),
    "AnalysisRequest": (".models", "AnalysisRequest"),
    "CandidateIssue": (".models", "CandidateIssue"),
    "CategoryFlags": (".models", "CategoryFlags"),
    "EmailContext": (".models", "EmailContext"),
    "FinalIssue": (".models", "FinalIssue"),
    "IssueCategory": (".models", "IssueCategory"),
    "IssueStatus": (".models", "IssueStatus"),
    "ResearchSection": (".models", "ResearchSection"),
    "Severity": (".models", "Severity"),
    "WritingMode": (".models", "WritingMode"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes."""

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"proofcheck{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
