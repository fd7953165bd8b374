# app/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config")
def debug_config() -> dict[str, Any]:
    """
    IMPORTANT: This reads the *running server's* settings, not your shell's.
    Nothing here is secret.
    """
    return {
        "ENV": settings.ENV,
        "LOG_LEVEL": settings.LOG_LEVEL,
        "LISTING_SOURCE": settings.LISTING_SOURCE,
        "STUB_LISTINGS_PATH": settings.STUB_LISTINGS_PATH,
        "RANDOM_SEED_SET": settings.RANDOM_SEED is not None,
        "TOP_DEALS_LIMIT": settings.TOP_DEALS_LIMIT,
        "MARKETPLACE_ITEM_URL_BASE": settings.MARKETPLACE_ITEM_URL_BASE,
    }

