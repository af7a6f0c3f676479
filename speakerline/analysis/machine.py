"""
AnalysisStateMachine: owns the lifecycle of analysis requests and the latest result.

Newest request wins. Every submit takes a new generation token; a response (success or
failure) whose token is not the current generation belongs to a superseded request and
is dropped without touching state. There is no cancellation and no automatic retry:
a Failed state only changes on the next user-initiated submit.

All transitions are expected to run on one event loop; the generation check is what
keeps late responses out, not ordering of the underlying HTTP calls.
"""
from __future__ import annotations

import logging
from typing import Callable

from speakerline.analysis.state import (
    IDLE,
    Failed,
    RequestState,
    StatusNotice,
    Submitting,
    Succeeded,
)
from speakerline.client.base import UploadClient, UploadedFile
from speakerline.diarization.models import AnalysisResult
from speakerline.errors import AnalysisError, ServiceError, TransportError, ValidationError

logger = logging.getLogger(__name__)

NO_AUDIO_MESSAGE = "Select an audio file first."
SUCCESS_MESSAGE = "Analysis complete. Transcription results are displayed below."


def _submitting_message(file_name: str) -> str:
    return f"Uploading {file_name} and awaiting API response..."


def _connection_error_message(reason: str) -> str:
    return f"Connection Error: {reason}. Check if the backend is running."


class AnalysisStateMachine:
    """
    Single writer of RequestState.

    select_audio / select_reference: pick files; a new pick discards a finished result.
    begin / resolve / fail: explicit transitions keyed by generation token.
    submit: begin + client.submit + resolve/fail in one await.
    on_change(state) is called after every accepted transition.
    """

    def __init__(
        self,
        client: UploadClient,
        on_change: Callable[[RequestState], None] | None = None,
        max_upload_bytes: int = 0,
    ) -> None:
        self._client = client
        self._on_change = on_change
        self._max_upload_bytes = max_upload_bytes
        self._state: RequestState = IDLE
        self._notice: StatusNotice | None = None
        self._generation = 0
        self._audio: UploadedFile | None = None
        self._reference: UploadedFile | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def notice(self) -> StatusNotice | None:
        return self._notice

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def audio(self) -> UploadedFile | None:
        return self._audio

    @property
    def reference(self) -> UploadedFile | None:
        return self._reference

    @property
    def result(self) -> AnalysisResult | None:
        """Latest result, only while Succeeded."""
        if isinstance(self._state, Succeeded):
            return self._state.result
        return None

    @property
    def is_submitting(self) -> bool:
        return isinstance(self._state, Submitting)

    def _set_state(self, state: RequestState, notice: StatusNotice | None) -> None:
        self._state = state
        self._notice = notice
        if self._on_change is not None:
            self._on_change(state)

    def _discard_outcome(self) -> None:
        if isinstance(self._state, (Succeeded, Failed)):
            logger.debug("Discarding previous %s outcome", self._state.status)
            self._set_state(IDLE, None)

    def select_audio(self, audio: UploadedFile | None) -> None:
        """Pick (or clear) the audio file."""
        self._audio = audio
        self._discard_outcome()

    def select_reference(self, reference: UploadedFile | None) -> None:
        """Pick (or clear) the optional RTTM reference."""
        self._reference = reference
        self._discard_outcome()

    def begin(self) -> int:
        """
        Start a submission: Submitting(file_name), previous result dropped.
        Returns the generation token the response must carry.
        Raises ValidationError (state unchanged, notice set) when no audio is selected
        or the audio exceeds the upload limit.
        """
        audio = self._audio
        if audio is None:
            self._reject(NO_AUDIO_MESSAGE)
        if self._max_upload_bytes and audio.size > self._max_upload_bytes:
            self._reject(
                f"{audio.name} is {audio.size} bytes; the upload limit is {self._max_upload_bytes} bytes."
            )

        self._generation += 1
        logger.info("Submission %d started for %s", self._generation, audio.name)
        self._set_state(Submitting(audio.name), StatusNotice("info", _submitting_message(audio.name)))
        return self._generation

    def _reject(self, message: str) -> None:
        logger.info("Submit rejected: %s", message)
        self._notice = StatusNotice("error", message)
        raise ValidationError(message)

    def _is_current(self, token: int) -> bool:
        if token != self._generation or not isinstance(self._state, Submitting):
            logger.info(
                "Dropping stale response for submission %d (current %d, state %s)",
                token,
                self._generation,
                self._state.status,
            )
            return False
        return True

    def resolve(self, token: int, result: AnalysisResult) -> bool:
        """Submitting -> Succeeded(result). False (no change) when token is stale."""
        if not self._is_current(token):
            return False
        logger.info("Submission %d succeeded: %d segments", token, len(result.segments))
        self._set_state(Succeeded(result), StatusNotice("success", SUCCESS_MESSAGE))
        return True

    def fail(self, token: int, error: AnalysisError | str) -> bool:
        """Submitting -> Failed(message). False (no change) when token is stale."""
        if not self._is_current(token):
            return False
        if isinstance(error, AnalysisError):
            message = error.message
        else:
            message = str(error)
        if isinstance(error, TransportError):
            notice_message = _connection_error_message(message)
        else:
            notice_message = message
        logger.warning("Submission %d failed: %s", token, message)
        self._set_state(Failed(message), StatusNotice("error", notice_message))
        return True

    async def submit(self) -> RequestState:
        """
        Run one submission end to end and return the state afterwards.
        If a newer submission started meanwhile, this one's outcome is dropped and the
        returned state is whatever the newer submission produced (or Submitting).
        """
        token = self.begin()
        audio = self._audio
        reference = self._reference
        try:
            result = await self._client.submit(audio, reference)
        except (ServiceError, TransportError) as exc:
            self.fail(token, exc)
        except Exception as exc:
            self.fail(token, str(exc) or type(exc).__name__)
            raise
        else:
            self.resolve(token, result)
        return self._state
