"""API module for FastAPI REST endpoints."""

from src.api.models import (
    GENERATION_ERROR_MESSAGE,
    ErrorResponse,
    GenerateStructureRequest,
    GenerateStructureResponse,
)

__all__ = [
    "GENERATION_ERROR_MESSAGE",
    "ErrorResponse",
    "GenerateStructureRequest",
    "GenerateStructureResponse",
]
