"""
Error taxonomy for one analysis request.

- ValidationError: rejected locally before any network call (no audio selected).
- ServiceError: the analysis service answered with a non-success status.
- TransportError: the request could not complete (connectivity, timeout, unreadable body).

A response for a superseded request is not an error; the state machine drops it.
"""
from __future__ import annotations


class AnalysisError(Exception):
    """Base for failures surfaced to the user as a status message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    """Submit rejected before the request is issued."""


class ServiceError(AnalysisError):
    """Non-success HTTP status from the analysis service."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(AnalysisError):
    """Request failed to complete or the response could not be read."""
