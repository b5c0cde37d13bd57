"""API Pydantic models."""
from app.api.models.errors import ErrorCodes, ErrorDetail, ErrorResponse
from app.api.models.requests import AnalyzeRequest
from app.api.models.responses import AnalyzedSite, HealthResponse

__all__ = [
    "AnalyzeRequest",
    "AnalyzedSite",
    "HealthResponse",
    "ErrorResponse",
    "ErrorDetail",
    "ErrorCodes",
]
