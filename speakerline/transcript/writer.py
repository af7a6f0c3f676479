"""
Plain-text transcript rendering.

One line per segment: "[Speaker_0] (0.00s - 1.25s) hello there". Segments without a
speaker label are shown as "Unknown Speaker". A short header names the file, language,
duration and, when a reference was scored, the DER breakdown.
"""
from __future__ import annotations

import logging
import os

from speakerline.diarization.models import AnalysisResult, Segment
from speakerline.transcript.segmenter import join_words

logger = logging.getLogger(__name__)

UNKNOWN_SPEAKER = "Unknown Speaker"
NO_SPEECH_MESSAGE = "No speech segments were detected in the audio."


def speaker_label(speaker: str | None) -> str:
    return speaker or UNKNOWN_SPEAKER


def format_seconds(value: float) -> str:
    """Two decimals, e.g. 1.5 -> '1.50s'."""
    return f"{value:.2f}s"


def format_segment_line(segment: Segment) -> str:
    span = f"({format_seconds(segment.start_time)} - {format_seconds(segment.end_time)})"
    return f"[{speaker_label(segment.speaker)}] {span} {join_words(segment)}".strip()


def _format_metric(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def format_header(result: AnalysisResult) -> list[str]:
    lines = [
        f"File: {result.filename}",
        f"Language: {result.language}",
        f"Duration: {format_seconds(result.duration)}",
    ]
    if result.reference_filename:
        lines.append(f"Reference: {result.reference_filename}")
    if result.has_metrics:
        lines.append(
            "DER: {} (speaker error {}, missed speech {}, false alarm {})".format(
                _format_metric(result.der),
                _format_metric(result.speaker_error),
                _format_metric(result.missed_speech),
                _format_metric(result.false_alarm),
            )
        )
    return lines


def format_transcript(result: AnalysisResult, include_header: bool = True) -> str:
    """Full transcript text for a result; header first, blank line, then segments."""
    parts: list[str] = []
    if include_header:
        parts.extend(format_header(result))
        parts.append("")
    if result.segments:
        parts.extend(format_segment_line(s) for s in result.segments)
    else:
        parts.append(NO_SPEECH_MESSAGE)
    return "\n".join(parts)


def write_transcript(result: AnalysisResult, path: str, include_header: bool = True) -> str:
    """Write the transcript to path (overwrites). Returns the path written."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_transcript(result, include_header=include_header) + "\n")
    logger.info("Transcript saved: %s (%d segments)", path, len(result.segments))
    return path
