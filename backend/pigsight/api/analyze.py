"""POST /api/analyze: acquire a detection, validate it, infer traits, summarise."""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import APIRouter, Depends, HTTPException

from pigsight.config import Settings
from pigsight.dependencies import get_gateway, get_settings
from pigsight.engine.rule_engine import infer_traits
from pigsight.engine.summary import compose_summary
from pigsight.engine.validator import check_subject
from pigsight.gateway.client import AnalysisGateway
from pigsight.models.detection import Detection
from pigsight.models.requests import AnalyzeRequest, ImageReference
from pigsight.models.responses import (
    AnalysisMetadata,
    AnalyzeResponse,
    ErrorResponse,
    TraitsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _traits_response(detection: Detection) -> TraitsResponse:
    traits = infer_traits(detection)
    return TraitsResponse(
        summary=compose_summary(traits),
        traits=traits,
        evidence=[t.evidence for t in traits],
    )


def require_image(req: AnalyzeRequest) -> ImageReference:
    """Reject bodies without an image before the gateway is built."""
    image = req.image_reference()
    if not image.request_body():
        raise HTTPException(
            status_code=400, detail="Either image_base64 or image_url must be provided"
        )
    return image


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={code: {"model": ErrorResponse} for code in (502, 503, 504)},
)
async def analyze(
    image: ImageReference = Depends(require_image),
    settings: Settings = Depends(get_settings),
    gateway: AnalysisGateway = Depends(get_gateway),
) -> AnalyzeResponse:
    start = time.perf_counter()
    analysis_id = str(uuid.uuid4())

    detection = await gateway.acquire_detection(image)

    rejection = check_subject(detection) if settings.require_subject_match else None
    if rejection is not None:
        result = TraitsResponse(summary=rejection.reason)
    else:
        result = _traits_response(detection)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Analysis %s: %d traits in %.0fms%s",
        analysis_id,
        len(result.traits),
        elapsed,
        " (rejected)" if rejection else "",
    )

    return AnalyzeResponse(
        id=analysis_id,
        accepted=rejection is None,
        summary=result.summary,
        traits=result.traits,
        evidence=result.evidence,
        description=detection.description,
        rejection=rejection.reason if rejection else None,
        metadata=AnalysisMetadata(
            detection_count=detection.detail_count,
            processing_time_ms=round(elapsed, 1),
        ),
    )


@router.post("/analyze/detection", response_model=TraitsResponse)
async def analyze_detection(detection: Detection) -> TraitsResponse:
    """Run the rules over an already acquired Detection. No network calls."""
    return _traits_response(detection)
