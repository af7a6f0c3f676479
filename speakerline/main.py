"""
FastAPI app: upload form backend for the diarized transcript page.

POST /api/analyze (multipart: audio_file, optional rttm_file) forwards the files to the
analysis service through the state machine and returns the transcript view.
GET /api/analysis returns the current view; GET /health is a liveness probe.

One AnalysisStateMachine per app: a newer upload supersedes an older in-flight one, and
the older response is dropped when it eventually arrives.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from speakerline.analysis.machine import AnalysisStateMachine
from speakerline.client.base import UploadClient, UploadedFile
from speakerline.client.http import HttpUploadClient
from speakerline.config import get_settings
from speakerline.errors import ValidationError
from speakerline.schemas.view import AnalysisView, build_view

logger = logging.getLogger(__name__)


async def _read_upload(upload: UploadFile | None, default_type: str) -> UploadedFile | None:
    """Browser forms send an empty part (no filename) when nothing was picked."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return UploadedFile(
        name=upload.filename,
        content=content,
        content_type=upload.content_type or default_type,
    )


def get_machine(app: FastAPI) -> AnalysisStateMachine:
    machine = getattr(app.state, "machine", None)
    if machine is None:
        raise RuntimeError("App not initialized (lifespan not run?)")
    return machine


def create_app(upload_client: UploadClient | None = None) -> FastAPI:
    """Build the app. upload_client defaults to HttpUploadClient against ANALYZER_URL."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        client = upload_client or HttpUploadClient()
        app.state.machine = AnalysisStateMachine(client, max_upload_bytes=settings.MAX_UPLOAD_BYTES)
        logger.info("Analysis service: %s", settings.ANALYZER_URL)
        yield
        await client.close()
        app.state.machine = None

    app = FastAPI(
        title="Speaker Diarization Transcript",
        description="Upload audio to an analysis service and view the speaker-attributed transcript",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/analysis", response_model=AnalysisView)
    async def current_analysis(request: Request) -> AnalysisView:
        return build_view(get_machine(request.app))

    @app.post("/api/analyze", response_model=AnalysisView)
    async def analyze(
        request: Request,
        audio_file: UploadFile | None = File(None),
        rttm_file: UploadFile | None = File(None),
    ):
        """
        Select the posted files and run one analysis.
        400 with the view when no audio file was posted; otherwise 200 with the view after
        this request (or a newer one) settled. A failed analysis is still a 200: the
        failure is part of the view (status=failed, notice.kind=error).
        """
        machine = get_machine(request.app)
        audio = await _read_upload(audio_file, "application/octet-stream")
        reference = await _read_upload(rttm_file, "text/plain")
        # No await between selecting and submit(): the machine captures this request's
        # files when it issues the token, before another request can select its own.
        machine.select_audio(audio)
        machine.select_reference(reference)
        try:
            await machine.submit()
        except ValidationError:
            return JSONResponse(status_code=400, content=build_view(machine).model_dump())
        except Exception as exc:
            logger.exception("Analysis crashed")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return build_view(machine)

    return app


app = create_app()
