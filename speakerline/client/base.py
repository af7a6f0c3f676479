"""
UploadClient: abstract interface for the remote analysis service.

Implementations: HttpUploadClient (httpx). submit() either returns a normalized
AnalysisResult or raises ServiceError / TransportError; it never returns partial data.
"""
from __future__ import annotations

import mimetypes
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from speakerline.diarization.models import AnalysisResult


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file, held in memory until it is sent."""

    name: str
    content: bytes = field(repr=False)
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str, default_type: str = "application/octet-stream") -> "UploadedFile":
        """Read a file from disk; content type guessed from the extension."""
        guessed, _ = mimetypes.guess_type(path)
        with open(path, "rb") as f:
            content = f.read()
        return cls(name=os.path.basename(path), content=content, content_type=guessed or default_type)


class UploadClient(ABC):
    """Submits one audio file (and optional RTTM reference) for analysis."""

    @abstractmethod
    async def submit(self, audio: UploadedFile, reference: UploadedFile | None = None) -> AnalysisResult:
        """
        Send the files and wait for the analysis.
        - Non-success status: raise ServiceError (service detail preferred).
        - Connectivity failure, timeout, unreadable body: raise TransportError.
        """
        ...

    async def close(self) -> None:
        """Release connections. Default: nothing to release."""
        return None
