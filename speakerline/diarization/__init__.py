"""
Speaker-attributed transcript data and speaker display styles.

Speaker labels are whatever the analysis service returned; no renaming or merging
of labels happens client-side.
"""
from __future__ import annotations

from speakerline.diarization.models import AnalysisResult, Segment, WordToken
from speakerline.diarization.speaker_styles import (
    DEFAULT_STYLE,
    SPEAKER_STYLES,
    SpeakerStyle,
    resolve_style,
    unique_speakers,
)

__all__ = [
    "AnalysisResult",
    "Segment",
    "WordToken",
    "DEFAULT_STYLE",
    "SPEAKER_STYLES",
    "SpeakerStyle",
    "resolve_style",
    "unique_speakers",
]
