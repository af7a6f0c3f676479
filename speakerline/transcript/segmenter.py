"""
Segmenter: flat word tokens -> speaker turns.

One pass, one open segment at a time. A token whose speaker differs (by value; None is
its own speaker) from the open segment closes it and opens a new one. Input order is
trusted: tokens are not sorted or validated, and end_time is overwritten with each
absorbed token's end, so out-of-order input can leave end_time < start_time.
"""
from __future__ import annotations

from typing import Iterable

from speakerline.diarization.models import Segment, WordToken


def segment_tokens(tokens: Iterable[WordToken]) -> list[Segment]:
    """Group consecutive same-speaker tokens. Empty input -> []."""
    segments: list[Segment] = []
    speaker: str | None = None
    words: list[str] = []
    start_time = 0.0
    end_time = 0.0
    is_open = False

    for token in tokens:
        if not is_open or token.speaker != speaker:
            if is_open:
                segments.append(Segment(speaker, tuple(words), start_time, end_time))
            speaker = token.speaker
            words = [token.text]
            start_time = token.start
            end_time = token.end
            is_open = True
        else:
            words.append(token.text)
            end_time = token.end

    if is_open:
        segments.append(Segment(speaker, tuple(words), start_time, end_time))
    return segments


def join_words(segment: Segment) -> str:
    """Display text of a segment: words separated by a single space."""
    return " ".join(segment.words)
