"""Pydantic schemas for the analysis service response. View models live in schemas.view."""
from speakerline.schemas.analysis import (
    AnalysisResponse,
    TimelineWord,
    extract_detail,
    normalize_response,
)

__all__ = [
    "AnalysisResponse",
    "TimelineWord",
    "extract_detail",
    "normalize_response",
]
