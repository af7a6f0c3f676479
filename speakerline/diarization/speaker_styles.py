"""
Speaker label -> display colors.

The table is built once at import and exposed read-only. Labels outside the table
(including None and "") share DEFAULT_STYLE.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from speakerline.diarization.models import WordToken


@dataclass(frozen=True)
class SpeakerStyle:
    """Foreground (label/border) and background color tokens."""

    color: str
    background: str


DEFAULT_STYLE = SpeakerStyle(color="#6c757d", background="#f8f9fa")

SPEAKER_STYLES: Mapping[str, SpeakerStyle] = MappingProxyType(
    {
        "Speaker_0": SpeakerStyle(color="#007bff", background="#e6f0ff"),
        "Speaker_1": SpeakerStyle(color="#28a745", background="#e9f8ec"),
        "Speaker_2": SpeakerStyle(color="#dc3545", background="#fceaea"),
        "Speaker_3": SpeakerStyle(color="#ffc107", background="#fff9e6"),
        "Speaker_4": SpeakerStyle(color="#6f42c1", background="#f3ebfa"),
    }
)


def resolve_style(speaker_id: str | None) -> SpeakerStyle:
    """Style for a speaker label; never fails."""
    if not speaker_id:
        return DEFAULT_STYLE
    return SPEAKER_STYLES.get(speaker_id, DEFAULT_STYLE)


def unique_speakers(tokens: Iterable[WordToken]) -> list[str]:
    """Distinct non-empty speaker labels, exact match (case-sensitive), sorted."""
    seen: set[str] = set()
    for token in tokens:
        if token.speaker:
            seen.add(token.speaker)
    return sorted(seen)
