"""
Schemas for the transcript view returned by GET/POST /api/analysis.

The view is derived from the state machine on every request; nothing here is stored.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from speakerline.analysis.machine import AnalysisStateMachine
from speakerline.analysis.state import Succeeded
from speakerline.diarization.models import AnalysisResult, Segment
from speakerline.diarization.speaker_styles import SpeakerStyle, resolve_style, unique_speakers
from speakerline.transcript.segmenter import join_words
from speakerline.transcript.writer import NO_SPEECH_MESSAGE, speaker_label

NOT_ANALYZED_MESSAGE = "Upload an audio file and run the analysis to view the diarized transcription."


class StyleView(BaseModel):
    color: str
    background: str

    @classmethod
    def from_style(cls, style: SpeakerStyle) -> "StyleView":
        return cls(color=style.color, background=style.background)


class NoticeView(BaseModel):
    kind: str = Field(..., description="info | success | error")
    message: str


class SpeakerView(BaseModel):
    """One entry of the 'Speakers Detected' list."""

    speaker: str
    style: StyleView


class SegmentView(BaseModel):
    speaker: str | None = Field(None, description="Raw label from the service")
    label: str = Field(..., description="Display label; 'Unknown Speaker' when speaker is null")
    text: str = Field(..., description="Words joined by single spaces")
    start: float = Field(..., description="Start in seconds, two decimals")
    end: float = Field(..., description="End in seconds, two decimals")
    style: StyleView


class MetricsView(BaseModel):
    der: float
    speaker_error: float | None = None
    missed_speech: float | None = None
    false_alarm: float | None = None


class AnalysisView(BaseModel):
    """Everything the transcript page renders."""

    status: str = Field(..., description="idle | submitting | succeeded | failed")
    notice: NoticeView | None = None
    filename: str | None = None
    reference_filename: str | None = None
    language: str | None = None
    duration: float | None = None
    metrics: MetricsView | None = Field(None, description="Null unless a reference RTTM was scored")
    speakers: list[SpeakerView] = Field(default_factory=list)
    segments: list[SegmentView] = Field(default_factory=list)
    placeholder: str | None = Field(None, description="Shown instead of segments when there are none")


def segment_view(segment: Segment) -> SegmentView:
    return SegmentView(
        speaker=segment.speaker,
        label=speaker_label(segment.speaker),
        text=join_words(segment),
        start=round(segment.start_time, 2),
        end=round(segment.end_time, 2),
        style=StyleView.from_style(resolve_style(segment.speaker)),
    )


def _metrics_view(result: AnalysisResult) -> MetricsView | None:
    if not result.has_metrics:
        return None
    return MetricsView(
        der=result.der,
        speaker_error=result.speaker_error,
        missed_speech=result.missed_speech,
        false_alarm=result.false_alarm,
    )


def build_view(machine: AnalysisStateMachine) -> AnalysisView:
    state = machine.state
    notice = machine.notice
    view = AnalysisView(
        status=state.status,
        notice=NoticeView(kind=notice.kind, message=notice.message) if notice else None,
    )
    if not isinstance(state, Succeeded):
        view.placeholder = NOT_ANALYZED_MESSAGE
        return view

    result = state.result
    view.filename = result.filename
    view.reference_filename = result.reference_filename
    view.language = result.language
    view.duration = result.duration
    view.metrics = _metrics_view(result)
    view.speakers = [
        SpeakerView(speaker=s, style=StyleView.from_style(resolve_style(s)))
        for s in unique_speakers(result.tokens)
    ]
    view.segments = [segment_view(s) for s in result.segments]
    if not view.segments:
        view.placeholder = NO_SPEECH_MESSAGE
    return view
