"""Analysis service clients: swappable behind UploadClient."""
from .base import UploadClient, UploadedFile
from .http import GENERIC_FAILURE_MESSAGE, HttpUploadClient

__all__ = [
    "UploadClient",
    "UploadedFile",
    "HttpUploadClient",
    "GENERIC_FAILURE_MESSAGE",
]
