"""API request and response models."""

from pydantic import BaseModel, Field

GENERATION_ERROR_MESSAGE = "Failed to generate article structure"


class GenerateStructureRequest(BaseModel):
    """Request model for article structure generation."""

    prompt: str = Field(description="Prompt forwarded to the language model as-is")


class GenerateStructureResponse(BaseModel):
    """Response model for article structure generation."""

    result: str = Field(description="Completion text (empty if the model returned none)")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Generic error message")
