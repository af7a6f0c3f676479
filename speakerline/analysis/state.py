"""
Request lifecycle states for one analysis.

Idle -> Submitting(file_name) -> Succeeded(result) | Failed(message).
Exactly one is active; each is immutable, so a transition always replaces the state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Union

from speakerline.diarization.models import AnalysisResult

NoticeKind = Literal["info", "success", "error"]


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Submitting:
    file_name: str
    status: ClassVar[str] = "submitting"


@dataclass(frozen=True)
class Succeeded:
    result: AnalysisResult
    status: ClassVar[str] = "succeeded"


@dataclass(frozen=True)
class Failed:
    message: str
    status: ClassVar[str] = "failed"


RequestState = Union[Idle, Submitting, Succeeded, Failed]

IDLE = Idle()


@dataclass(frozen=True)
class StatusNotice:
    """Status line shown next to the upload form."""

    kind: NoticeKind
    message: str
