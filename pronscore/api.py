"""
HTTP API for pronscore.

Endpoints:
    GET  /api/analyze-pronunciation   random or specific practice phrase
    POST /api/analyze-pronunciation   transcribe base64 audio and score it
    POST /api/analyze-text            score a transcript directly
    GET  /api/phrase                  random practice phrase

Run with:
    uvicorn pronscore.api:app
"""

import base64
import binascii
from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from pronscore import __version__
from pronscore.config import get_settings
from pronscore.data import get_phrase, random_phrase
from pronscore.exceptions import (
    InvalidInputError,
    PhraseNotFoundError,
    TranscriptionError,
)
from pronscore.service import PronunciationService

logger = logging.getLogger(__name__)


class AnalyzeAudioRequest(BaseModel):
    audio: Optional[str] = Field(default=None, description="Base64-encoded audio")
    expectedText: Optional[str] = Field(default=None, description="Reference text")
    phraseId: Optional[int] = Field(default=None, description="Catalogue phrase id")


class AnalyzeTextRequest(BaseModel):
    expectedText: Optional[str] = Field(default=None, description="Reference text")
    spokenText: Optional[str] = Field(default="", description="Transcript to score")


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


def create_app(service: PronunciationService | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Evaluation service to use (a Wit.ai-backed one by default)
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.service.close()

    app = FastAPI(title="pronscore", version=__version__, lifespan=lifespan)
    app.state.service = service or PronunciationService(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    def get_service(request: Request) -> PronunciationService:
        return request.app.state.service

    # ============ Error handlers ============

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"Invalid {field}" if field else "Invalid request"
        return _error(400, message, details=first.get("msg", ""))

    @app.exception_handler(PhraseNotFoundError)
    async def phrase_not_found_handler(request: Request, exc: PhraseNotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(TranscriptionError)
    async def transcription_error_handler(request: Request, exc: TranscriptionError):
        logger.error("Transcription failed: %s", exc.message)
        return _error(502, "Transcription service error", details=exc.message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("API error")
        return _error(500, "Internal server error", details=str(exc))

    # ============ Routes ============

    @app.get("/api/analyze-pronunciation")
    def get_practice_phrase(
        difficulty: Optional[str] = Query(default=None),
        phraseId: Optional[int] = Query(default=None),
    ):
        if phraseId is not None:
            phrase = get_phrase(phraseId, settings.phrases_file)
        else:
            phrase = random_phrase(difficulty, path=settings.phrases_file)
        return {"success": True, "phrase": phrase.model_dump(mode="json")}

    @app.post("/api/analyze-pronunciation")
    def analyze_pronunciation(
        body: AnalyzeAudioRequest,
        service: PronunciationService = Depends(get_service),
    ):
        if not body.audio:
            return _error(400, "Audio is required")
        try:
            audio = base64.b64decode(body.audio, validate=True)
        except (binascii.Error, ValueError):
            return _error(400, "Audio must be base64-encoded")

        return service.evaluate(audio, body.expectedText, body.phraseId)

    @app.post("/api/analyze-text")
    def analyze_text(
        body: AnalyzeTextRequest,
        service: PronunciationService = Depends(get_service),
    ):
        if not body.expectedText:
            return _error(400, "Expected text is required")
        return service.score_text(body.expectedText, body.spokenText)

    @app.get("/api/phrase")
    def get_random_phrase(difficulty: Optional[str] = Query(default=None)):
        phrase = random_phrase(difficulty, path=settings.phrases_file)
        return {"success": True, "phrase": phrase.model_dump(mode="json")}

    return app


app = create_app()
