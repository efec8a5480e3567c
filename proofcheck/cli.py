"""Command-line entry point: analyse text files and print or report the issues."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional

from .config import Settings, load_settings
from .engine.apply import document_stats
from .engine.pipeline import AnalysisResult, analyze, ensure_analyzable
from .errors import DocumentRejectedError
from .integrations.language_tool import (
    TRANSIENT_ERRORS,
    LanguageToolManager,
    LanguageToolSource,
)
from .models import AnalysisRequest, CandidateIssue, CategoryFlags, WritingMode
from .models.options import FLAG_NAMES
from .reporting import DocumentReport, write_reports

LOGGER = logging.getLogger(__name__)

MODE_CHOICES = WritingMode.all_values() + ["academic"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Detect spelling, grammar, style and tone issues in text documents.",
    )
    parser.add_argument("paths", nargs="+", type=Path, metavar="PATH", help="Text files to analyse.")
    parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        default=None,
        help="Writing mode (default: PROOFCHECK_DEFAULT_MODE or general).",
    )
    parser.add_argument(
        "--disable",
        action="append",
        choices=FLAG_NAMES,
        default=[],
        metavar="CATEGORY",
        help="Disable an issue category or the purpose checks (can be specified multiple times).",
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=FLAG_NAMES,
        default=[],
        metavar="CATEGORY",
        help="Enable only the given categories (can be specified multiple times).",
    )
    parser.add_argument(
        "--section",
        default=None,
        help="Research paper section for section-aware hints (academic_research mode).",
    )
    parser.add_argument("--recipient-type", default=None, help="Email recipient, e.g. Manager or HR.")
    parser.add_argument("--purpose", default=None, help="Email purpose, e.g. vacation_request.")
    parser.add_argument("--tone", default=None, help="Required email tone, e.g. Formal.")
    parser.add_argument(
        "--max-issues",
        type=int,
        default=None,
        help="Maximum number of issues returned per document (default: 50).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a Markdown report (and a sibling .csv) instead of printing JSON.",
    )
    parser.add_argument(
        "--language-tool",
        action="store_true",
        help="Also collect candidates from LanguageTool (requires Java).",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Include character, word and page counts (PROOFCHECK_PAGE_SIZE characters per page).",
    )
    parser.add_argument("--dotenv", type=Path, default=None, help="Path to a .env file to load.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: PROOFCHECK_LOG_LEVEL or INFO).",
    )
    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)


def build_categories(only: list[str], disable: list[str]) -> CategoryFlags:
    flags = CategoryFlags.only(only) if only else CategoryFlags()
    if disable:
        flags = flags.without(disable)
    return flags


def build_request(text: str, args: argparse.Namespace, settings: Settings) -> AnalysisRequest:
    email = {
        "recipient_type": args.recipient_type,
        "purpose": args.purpose,
        "tone": args.tone,
    }
    return AnalysisRequest(
        document=text,
        mode=args.mode or settings.default_mode,
        categories=build_categories(args.only, args.disable),
        email=email,
        section=args.section,
    )


def _collect_external(source: LanguageToolSource | None, text: str, path: Path) -> list[CandidateIssue]:
    if source is None:
        return []
    try:
        return source.collect(text)
    except TRANSIENT_ERRORS as exc:
        LOGGER.error("LanguageTool failed for %s; continuing without it: %s", path, exc)
        return []


def analyze_path(
    path: Path,
    args: argparse.Namespace,
    settings: Settings,
    source: LanguageToolSource | None = None,
) -> tuple[str, AnalysisResult]:
    """Read, validate and analyse one file; return its text and the result.

    Raises:
            FileNotFoundError: if ``path`` is not a file.
            DocumentRejectedError: if the content is too short to analyse.
    """

    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    text = ensure_analyzable(path.read_text(encoding="utf-8"), settings.min_length)
    request = build_request(text, args, settings)
    max_issues = args.max_issues if args.max_issues is not None else settings.max_issues
    result = analyze(
        request,
        external_candidates=_collect_external(source, text, path),
        max_issues=max_issues,
    )
    return text, result


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.dotenv)
    logging.basicConfig(level=args.log_level or settings.log_level)

    source: LanguageToolSource | None = None
    if args.language_tool:
        source = LanguageToolSource(
            manager=LanguageToolManager(base_language=settings.language)
        )

    exit_code = 0
    reports: list[DocumentReport] = []
    try:
        for path in args.paths:
            LOGGER.info("Checking %s", path)
            try:
                text, result = analyze_path(path, args, settings, source)
            except (FileNotFoundError, DocumentRejectedError) as exc:
                LOGGER.error("%s: %s", path, exc)
                exit_code = 1
                continue
            if args.report is None:
                payload = {"file": str(path), **result.to_payload()}
                if args.stats:
                    payload["stats"] = asdict(document_stats(text, settings.page_size))
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            reports.append(DocumentReport(path=path, result=result))
    finally:
        if source is not None:
            source.close()

    if args.report is not None:
        report_path, csv_path = write_reports(reports, args.report)
        print(f"Proofcheck report written to {report_path.resolve()}")
        print(f"CSV report written to {csv_path.resolve()}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
