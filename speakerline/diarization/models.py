"""
Speaker-attributed transcript structures returned by the analysis service.

- WordToken: one transcribed word with speaker label and start/end (seconds).
- Segment: maximal run of consecutive tokens sharing the same speaker value.
- AnalysisResult: everything shown for one completed analysis.

All three are frozen; a new analysis always builds a new AnalysisResult.
Speaker labels come from the service as-is (e.g. "Speaker_0"); None means unattributed.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordToken:
    """Single word with speaker and start/end in seconds (start >= 0, end >= start)."""

    text: str
    speaker: str | None
    start: float
    end: float


@dataclass(frozen=True)
class Segment:
    """
    One speaker turn.

    start_time: start of the first token in the run.
    end_time: end of the most recently absorbed token (not a running max).
    """

    speaker: str | None
    words: tuple[str, ...]
    start_time: float
    end_time: float


@dataclass(frozen=True)
class AnalysisResult:
    """
    Normalized service response for one submission.

    der and its components are present together only when a reference RTTM was scored.
    tokens is the flat word list the segments were built from.
    """

    filename: str
    reference_filename: str | None
    duration: float
    language: str
    der: float | None = None
    speaker_error: float | None = None
    missed_speech: float | None = None
    false_alarm: float | None = None
    segments: tuple[Segment, ...] = ()
    tokens: tuple[WordToken, ...] = field(default=(), repr=False)

    @property
    def has_metrics(self) -> bool:
        """True when the service scored the diarization against a reference."""
        return self.der is not None
