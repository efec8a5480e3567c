from .enums import (
    EmailPurpose,
    IssueCategory,
    IssueStatus,
    RegionName,
    ResearchSection,
    Severity,
    WritingMode,
)
from .issue import CandidateIssue, FinalIssue
from .options import AnalysisRequest, CategoryFlags, EmailContext

__all__ = [
    "AnalysisRequest",
    "CandidateIssue",
    "CategoryFlags",
    "EmailContext",
    "EmailPurpose",
    "FinalIssue",
    "IssueCategory",
    "IssueStatus",
    "RegionName",
    "ResearchSection",
    "Severity",
    "WritingMode",
]
