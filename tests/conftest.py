from __future__ import annotations

import asyncio

import pytest

from speakerline.client.base import UploadClient, UploadedFile
from speakerline.diarization.models import AnalysisResult, WordToken
from speakerline.errors import ServiceError
from speakerline.schemas.analysis import normalize_response


def tok(text: str, speaker: str | None, start: float, end: float) -> WordToken:
    return WordToken(text=text, speaker=speaker, start=start, end=end)


def make_result(filename: str = "a.wav", **payload) -> AnalysisResult:
    body = {"duration": 1.3, "language": "en", "timeline_data": []}
    body.update(payload)
    return normalize_response(body, filename)


class ScriptedClient(UploadClient):
    """Returns queued outcomes in order; an exception instance is raised instead of returned."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[UploadedFile, UploadedFile | None]] = []
        self.closed = False

    async def submit(self, audio, reference=None):
        self.calls.append((audio, reference))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


class PendingClient(UploadClient):
    """Each submit waits on a future the test resolves explicitly."""

    def __init__(self) -> None:
        self.pending: list[asyncio.Future] = []
        self.calls: list[tuple[UploadedFile, UploadedFile | None]] = []

    async def submit(self, audio, reference=None):
        fut = asyncio.get_running_loop().create_future()
        self.pending.append(fut)
        self.calls.append((audio, reference))
        return await fut


@pytest.fixture()
def audio() -> UploadedFile:
    return UploadedFile(name="meeting.wav", content=b"RIFF....WAVE", content_type="audio/wav")


@pytest.fixture()
def reference() -> UploadedFile:
    return UploadedFile(
        name="meeting.rttm",
        content=b"SPEAKER meeting 1 0.00 1.00 <NA> <NA> Speaker_0 <NA> <NA>\n",
        content_type="text/plain",
    )


@pytest.fixture()
def service_error() -> ServiceError:
    return ServiceError("unsupported format", status_code=415)
