"""Transcript handling: speaker-turn segmentation and text rendering."""
from .segmenter import join_words, segment_tokens
from .writer import format_segment_line, format_transcript, write_transcript

__all__ = [
    "join_words",
    "segment_tokens",
    "format_segment_line",
    "format_transcript",
    "write_transcript",
]
