"""Markdown and CSV report builders for batches of analysed documents.

The builders take ``DocumentReport`` records so they can be used and tested
without touching the filesystem; ``write_reports`` writes both files next to
each other.
"""

from __future__ import annotations

import csv
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .engine.pipeline import AnalysisResult

LOGGER = logging.getLogger(__name__)

CSV_HEADERS = [
    "Filename",
    "Mode",
    "Rule ID",
    "Type",
    "Severity",
    "Start",
    "End",
    "Original",
    "Message",
    "Suggestion",
]


@dataclass
class DocumentReport:
    path: Path
    result: AnalysisResult

    @property
    def issue_count(self) -> int:
        return len(self.result.issues)


def _cell(value: str | None, empty: str = "—") -> str:
    """Escape a value for a Markdown table cell."""

    if not value:
        return empty
    return value.replace("|", "\\|").replace("\n", " ")


def _sorted_reports(reports: Iterable[DocumentReport]) -> list[DocumentReport]:
    return sorted(reports, key=lambda item: (item.path.name.lower(), str(item.path)))


def build_report_markdown(reports: Iterable[DocumentReport]) -> str:
    """Convert analysed documents into Markdown output."""

    report_list = _sorted_reports(reports)
    total_issues = sum(report.issue_count for report in report_list)

    type_totals: Counter[str] = Counter()
    for report in report_list:
        type_totals.update(issue.type.value for issue in report.result.issues)

    lines: list[str] = []
    lines.append("# Proofcheck Report")
    lines.append("")
    lines.append(f"- Checked {len(report_list)} document(s)")
    lines.append(f"- Total issues found: {total_issues}")

    lines.append("")
    lines.append("## Totals by Type")
    if type_totals:
        for issue_type in sorted(type_totals):
            lines.append(f"- {issue_type}: {type_totals[issue_type]} issue(s)")
    else:
        lines.append("- No issues found.")

    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("## Document Details")
    if not report_list:
        lines.append("")
        lines.append("_No documents checked._")
        return "\n".join(lines)

    for report in report_list:
        result = report.result
        lines.append("")
        lines.append(f"### {report.path.name} ({result.mode.value})")
        lines.append("")
        if not result.issues:
            lines.append("_No issues found._")
            continue

        lines.append(f"Found {report.issue_count} issue(s).")
        if result.metrics.truncated:
            lines.append(f"{result.metrics.truncated} further issue(s) were not reported.")
        lines.append("")
        lines.append("| Span | Rule | Type | Severity | Original | Message | Suggestion |")
        lines.append("| --- | --- | --- | --- | --- | --- | --- |")
        for issue in result.issues:
            lines.append(
                f"| {issue.start_index}-{issue.end_index} | `{issue.rule_id or '—'}` "
                f"| {issue.type.value} | {issue.severity.value} | {_cell(issue.original_text)} "
                f"| {_cell(issue.message)} | {_cell(issue.suggestion_text)} |"
            )

    return "\n".join(lines)


def build_report_csv(reports: Iterable[DocumentReport]) -> list[list[str]]:
    """Convert analysed documents into CSV rows, headers first."""

    rows: list[list[str]] = [list(CSV_HEADERS)]
    for report in _sorted_reports(reports):
        for issue in report.result.issues:
            rows.append(
                [
                    report.path.name,
                    report.result.mode.value,
                    issue.rule_id,
                    issue.type.value,
                    issue.severity.value,
                    str(issue.start_index),
                    str(issue.end_index),
                    issue.original_text,
                    issue.message,
                    issue.suggestion_text,
                ]
            )
    return rows


def write_reports(reports: Iterable[DocumentReport], report_path: Path) -> tuple[Path, Path]:
    """Write the Markdown report and its sibling ``.csv``; return both paths."""

    report_list = list(reports)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_markdown(report_list), encoding="utf-8")

    csv_path = report_path.with_suffix(".csv")
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(build_report_csv(report_list))

    LOGGER.info("Wrote report for %d document(s) to %s", len(report_list), report_path)
    return report_path, csv_path
