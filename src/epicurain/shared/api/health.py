from __future__ import annotations
import time
from fastapi import APIRouter

from epicurain.shared.config.settings import settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health():
    return {"ok": True, "ts": time.time(), "env": settings.APP_ENV, "model": settings.CHAT_MODEL}
