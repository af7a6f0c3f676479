"""
Schemas for the analysis service response (POST /upload).

Success body: duration, language, optional DER breakdown, timeline_data (flat word list).
Failure body: {"detail": "..."} (FastAPI convention); detail may also be a list of
validation errors, each with a "msg".
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from speakerline.diarization.models import AnalysisResult, WordToken
from speakerline.errors import TransportError
from speakerline.transcript.segmenter import segment_tokens

DEFAULT_LANGUAGE = "Unknown"


class TimelineWord(BaseModel):
    """One element of timeline_data."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., description="Transcribed word")
    speaker: str | None = Field(None, description="Speaker label, e.g. Speaker_0; null when unattributed")
    start: float = Field(..., description="Word start in seconds")
    end: float = Field(..., description="Word end in seconds")

    def to_token(self) -> WordToken:
        return WordToken(text=self.text, speaker=self.speaker, start=self.start, end=self.end)


class AnalysisResponse(BaseModel):
    """Success body. Every field is optional on the wire; defaults applied in normalize_response."""

    model_config = ConfigDict(extra="ignore")

    duration: float | None = Field(None, description="Audio duration in seconds")
    language: str | None = Field(None, description="Detected language")
    der: float | None = Field(None, description="Diarization error rate; only when a reference RTTM was sent")
    speaker_error: float | None = None
    missed_speech: float | None = None
    false_alarm: float | None = None
    timeline_data: list[TimelineWord] | None = Field(None, description="Word tokens in start order")


def extract_detail(payload: Any) -> str | None:
    """Failure message from an error body, or None when the body carries none."""
    if not isinstance(payload, dict):
        return None
    detail = payload.get("detail")
    if isinstance(detail, str):
        return detail.strip() or None
    if isinstance(detail, list):
        messages = [str(item["msg"]) for item in detail if isinstance(item, dict) and item.get("msg")]
        return "; ".join(messages) or None
    return None


def normalize_response(
    payload: Any,
    filename: str,
    reference_filename: str | None = None,
) -> AnalysisResult:
    """
    Build an AnalysisResult from a success body.

    duration -> 0 and language -> "Unknown" when missing or empty; der and its components
    stay None when absent; timeline_data -> [] when missing. Raises TransportError when the
    body does not match the schema.
    """
    if not isinstance(payload, dict):
        raise TransportError(f"Malformed analysis response: expected object, got {type(payload).__name__}")
    try:
        data = AnalysisResponse.model_validate(payload)
    except PydanticValidationError as exc:
        raise TransportError(f"Malformed analysis response: {exc.error_count()} invalid field(s)") from exc

    tokens = tuple(w.to_token() for w in (data.timeline_data or []))
    return AnalysisResult(
        filename=filename,
        reference_filename=reference_filename,
        duration=data.duration or 0,
        language=data.language or DEFAULT_LANGUAGE,
        der=data.der,
        speaker_error=data.speaker_error,
        missed_speech=data.missed_speech,
        false_alarm=data.false_alarm,
        segments=tuple(segment_tokens(tokens)),
        tokens=tokens,
    )
