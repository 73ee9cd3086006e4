"""FastAPI application for the article structure generation endpoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import (
    GENERATION_ERROR_MESSAGE,
    ErrorResponse,
    GenerateStructureRequest,
    GenerateStructureResponse,
)
from src.chains.structure_generator import StructureGeneratorChain
from src.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

GENERATE_STRUCTURE_PATH = "/generate-article-structure"

# Initialized on startup, or lazily on first request
structure_generator: StructureGeneratorChain | None = None


def get_structure_generator() -> StructureGeneratorChain:
    """Return the shared chain, creating it on first use."""
    global structure_generator
    if structure_generator is None:
        structure_generator = StructureGeneratorChain()
    return structure_generator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    logger.info("Initializing API resources...")
    try:
        get_structure_generator()
    except Exception:
        # Missing credentials surface as 500s on the first request instead
        logger.exception("Could not initialize language model client")

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="Article Studio API",
    description="Prompt passthrough for article structure generation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post(
    GENERATE_STRUCTURE_PATH,
    response_model=GenerateStructureResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_article_structure(body: GenerateStructureRequest):
    """Forward a prompt to the language model and return its text.

    Exactly one upstream call is made. Upstream failures are logged and
    reported with a fixed message; the cause is never returned to the client.

    Args:
        body: Request with the prompt to forward.

    Returns:
        The completion text, or a 500 error payload.
    """
    try:
        generator = get_structure_generator()
        result = await generator.agenerate(body.prompt)
    except Exception:
        logger.exception("Error generating article structure")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERATION_ERROR_MESSAGE).model_dump(),
        )

    return GenerateStructureResponse(result=result)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer every non-POST method on the structure endpoint with an empty 405."""
    if exc.status_code == 405 and request.url.path == GENERATE_STRUCTURE_PATH:
        return Response(status_code=405, headers={"Allow": "POST"})
    return await http_exception_handler(request, exc)
