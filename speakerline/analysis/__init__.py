"""Analysis request lifecycle: tagged states and the state machine that drives them."""
from __future__ import annotations

from speakerline.analysis.machine import NO_AUDIO_MESSAGE, SUCCESS_MESSAGE, AnalysisStateMachine
from speakerline.analysis.state import (
    IDLE,
    Failed,
    Idle,
    RequestState,
    StatusNotice,
    Submitting,
    Succeeded,
)

__all__ = [
    "AnalysisStateMachine",
    "NO_AUDIO_MESSAGE",
    "SUCCESS_MESSAGE",
    "IDLE",
    "Failed",
    "Idle",
    "RequestState",
    "StatusNotice",
    "Submitting",
    "Succeeded",
]
