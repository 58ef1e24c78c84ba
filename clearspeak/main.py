from __future__ import annotations

import logging
import time
from logging.config import dictConfig
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from clearspeak.config import Settings, get_settings, settings_public_summary
from clearspeak.engine import IntentEngine
from clearspeak.intents import Category
from clearspeak.observability import logging_config
from clearspeak.schemas import (
    EnhanceRequest,
    EnhanceResponse,
    SelectionRequest,
    SuggestionList,
    SuggestionOut,
)

_settings = get_settings()
dictConfig(logging_config(_settings.log_level))
logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
MAX_LIMIT = 50


def get_engine(request: Request) -> IntentEngine:
    return request.app.state.engine


def _suggestion_list(suggestions, query: Optional[str] = None) -> SuggestionList:
    return SuggestionList(query=query, suggestions=[SuggestionOut.from_suggestion(s) for s in suggestions])


def create_app(engine: Optional[IntentEngine] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(title="ClearSpeak Intent Service", version=APP_VERSION)
    application.state.engine = engine if engine is not None else IntentEngine.from_settings(settings)
    application.state.started_at = time.monotonic()
    logger.info("[CFG] loaded", extra=settings_public_summary(settings))

    @application.get("/health")
    async def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "version": APP_VERSION,
            "uptime_seconds": int(time.monotonic() - application.state.started_at),
        }

    @application.get("/api/suggestions", response_model=SuggestionList)
    def suggestions(
        q: str = Query("", max_length=2000),
        limit: Optional[int] = Query(None, ge=0, le=MAX_LIMIT),
        engine: IntentEngine = Depends(get_engine),
    ) -> SuggestionList:
        return _suggestion_list(engine.suggest(q, limit), query=q)

    @application.get("/api/suggestions/popular", response_model=SuggestionList)
    def popular(
        limit: Optional[int] = Query(None, ge=0, le=MAX_LIMIT),
        engine: IntentEngine = Depends(get_engine),
    ) -> SuggestionList:
        return _suggestion_list(engine.popular(limit))

    @application.get("/api/suggestions/emergency", response_model=SuggestionList)
    def emergency(engine: IntentEngine = Depends(get_engine)) -> SuggestionList:
        return _suggestion_list(engine.emergency())

    @application.get("/api/suggestions/category/{category}", response_model=SuggestionList)
    def by_category(
        category: str,
        limit: int = Query(3, ge=0, le=MAX_LIMIT),
        engine: IntentEngine = Depends(get_engine),
    ) -> SuggestionList:
        try:
            wanted = Category(category.lower())
        except ValueError:
            raise HTTPException(status_code=404, detail=f"unknown category: {category}")
        return _suggestion_list(engine.by_category(wanted, limit))

    @application.post("/api/selections", status_code=204)
    def select(payload: SelectionRequest, engine: IntentEngine = Depends(get_engine)) -> Response:
        try:
            engine.select(payload.id)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"unknown intent id: {payload.id}")
        return Response(status_code=204)

    @application.post("/api/enhance", response_model=EnhanceResponse)
    def enhance(payload: EnhanceRequest, engine: IntentEngine = Depends(get_engine)) -> EnhanceResponse:
        result = engine.enhance_detailed(payload.text)
        return EnhanceResponse(
            original=payload.text,
            enhanced=result.text,
            tier=result.tier.value,
            confidence=result.confidence,
            entry_id=result.entry_id,
        )

    @application.exception_handler(Exception)
    async def handle_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("[API] unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"status": "error", "detail": "sanitized failure"})

    return application


app = create_app()
