"""Exceptions raised at the edges of the engine."""

from __future__ import annotations


class ProofcheckError(Exception):
    """Base class for errors raised by proofcheck."""


class DocumentRejectedError(ProofcheckError, ValueError):
    """Raised when a document is missing or too short to analyse."""


class IssueStateError(ProofcheckError):
    """Raised when an issue cannot be applied in its current lifecycle state."""
