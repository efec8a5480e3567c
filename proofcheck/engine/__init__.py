"""Detection engine exports.

Submodules are imported lazily so that the rule modules can import
``proofcheck.engine.registry`` without pulling in the pipeline, which in
turn depends on the rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .apply import DocumentStats, apply_issue, document_stats
    from .executor import ExecutionReport, run_detectors
    from .pipeline import (
        AnalysisMetrics,
        AnalysisResult,
        analyze,
        analyze_document,
        ensure_analyzable,
    )
    from .regions import Region, RegionMap, parse_regions
    from .registry import DetectorRegistry, FunctionDetector, PatternDetector, ScanContext
    from .resolver import resolve_conflicts
    from .spans import normalize_spans
    from .validator import MAX_ISSUES, finalize_issues

__all__ = [
    "AnalysisMetrics",
    "AnalysisResult",
    "DetectorRegistry",
    "DocumentStats",
    "ExecutionReport",
    "FunctionDetector",
    "MAX_ISSUES",
    "PatternDetector",
    "Region",
    "RegionMap",
    "ScanContext",
    "analyze",
    "analyze_document",
    "apply_issue",
    "document_stats",
    "ensure_analyzable",
    "finalize_issues",
    "normalize_spans",
    "parse_regions",
    "resolve_conflicts",
    "run_detectors",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "AnalysisMetrics": (".pipeline", "AnalysisMetrics"),
    "AnalysisResult": (".pipeline", "AnalysisResult"),
    "analyze": (".pipeline", "analyze"),
    "analyze_document": (".pipeline", "analyze_document"),
    "ensure_analyzable": (".pipeline", "ensure_analyzable"),
    "DocumentStats": (".apply", "DocumentStats"),
    "apply_issue": (".apply", "apply_issue"),
    "document_stats": (".apply", "document_stats"),
    "ExecutionReport": (".executor", "ExecutionReport"),
    "run_detectors": (".executor", "run_detectors"),
    "Region": (".regions", "Region"),
    "RegionMap": (".regions", "RegionMap"),
    "parse_regions": (".regions", "parse_regions"),
    "DetectorRegistry": (".registry", "DetectorRegistry"),
    "FunctionDetector": (".registry", "FunctionDetector"),
    "PatternDetector": (".registry", "PatternDetector"),
    "ScanContext": (".registry", "ScanContext"),
    "resolve_conflicts": (".resolver", "resolve_conflicts"),
    "normalize_spans": (".spans", "normalize_spans"),
    "MAX_ISSUES": (".validator", "MAX_ISSUES"),
    "finalize_issues": (".validator", "finalize_issues"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes."""

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"proofcheck.engine{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
