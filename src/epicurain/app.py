from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from epicurain.shared.config.settings import settings
from epicurain.shared.logging.logger import setup_logging

from epicurain.shared.api.health import router as health_router
from epicurain.features.recipes.api.routes import router as recipes_router

log = logging.getLogger("app")


def _split_csv(value: str) -> List[str]:
    if not value or value == "*":
        return ["*"]
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="EpicurAIn", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_csv(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split_csv(settings.CORS_ALLOW_METHODS),
        allow_headers=_split_csv(settings.CORS_ALLOW_HEADERS),
    )

    # Routers
    app.include_router(health_router)
    app.include_router(recipes_router)

    if not settings.OPENAI_API_KEY:
        log.warning("OPENAI_API_KEY is not set; recipe generation will fail upstream")
    log.info("EpicurAIn ready (env=%s, model=%s)", settings.APP_ENV, settings.CHAT_MODEL)
    return app

# Uvicorn/Gunicorn entry point
app = create_app()
