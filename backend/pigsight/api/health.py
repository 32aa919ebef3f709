"""Health check + meta endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from pigsight.config import Settings
from pigsight.dependencies import get_settings
from pigsight.engine.registry import load_rules
from pigsight.engine.statements import ANALYSIS_RUBRIC
from pigsight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        rules_registered=load_rules().count,
        analyzer_configured=bool(
            settings.content_understanding_endpoint and settings.content_understanding_key
        ),
    )


@router.get("/rubric")
async def rubric() -> dict[str, dict[str, Any]]:
    return ANALYSIS_RUBRIC
