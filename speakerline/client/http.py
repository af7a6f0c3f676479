"""
HttpUploadClient: analysis service over HTTP (multipart POST).

Fields: audio_file (required), rttm_file (only when a reference is supplied; never sent empty).
"""
from __future__ import annotations

import logging

import httpx

from speakerline.client.base import UploadClient, UploadedFile
from speakerline.config import get_settings
from speakerline.diarization.models import AnalysisResult
from speakerline.errors import ServiceError, TransportError
from speakerline.schemas.analysis import extract_detail, normalize_response

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "File upload and analysis failed."


def _build_files(audio: UploadedFile, reference: UploadedFile | None) -> dict[str, tuple[str, bytes, str]]:
    files = {"audio_file": (audio.name, audio.content, audio.content_type)}
    if reference is not None:
        files["rttm_file"] = (reference.name, reference.content, reference.content_type)
    return files


class HttpUploadClient(UploadClient):
    """
    POSTs to ANALYZER_URL with an httpx.AsyncClient.
    Pass client= to reuse a pooled client (or a mock transport in tests).
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = get_settings()
        self._url = url or settings.ANALYZER_URL
        self._timeout = timeout if timeout is not None else settings.ANALYZER_TIMEOUT_SECONDS
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

    @property
    def url(self) -> str:
        return self._url

    async def submit(self, audio: UploadedFile, reference: UploadedFile | None = None) -> AnalysisResult:
        logger.info(
            "Uploading %s (%d bytes)%s to %s",
            audio.name,
            audio.size,
            f" with reference {reference.name}" if reference else "",
            self._url,
        )
        try:
            resp = await self._client.post(self._url, files=_build_files(audio, reference))
        except httpx.HTTPError as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("Analysis request for %s failed: %s", audio.name, reason)
            raise TransportError(reason) from exc

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = extract_detail(body) or GENERIC_FAILURE_MESSAGE
            logger.warning("Analysis service returned %d for %s: %s", resp.status_code, audio.name, message)
            raise ServiceError(message, status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise TransportError("Analysis service returned a non-JSON response") from exc

        result = normalize_response(payload, audio.name, reference.name if reference else None)
        logger.info(
            "Analysis of %s complete: %d tokens, %d segments, language=%s",
            audio.name,
            len(result.tokens),
            len(result.segments),
            result.language,
        )
        return result

    async def close(self) -> None:
        await self._client.aclose()
