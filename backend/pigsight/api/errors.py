"""Analyzer exceptions -> HTTP error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pigsight.gateway.exceptions import (
    AcquisitionTimeout,
    AnalyzerError,
    ConfigurationError,
    MalformedResult,
    RemoteFailure,
    SubmissionError,
)
from pigsight.models.responses import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[AnalyzerError], int] = {
    ConfigurationError: 503,
    SubmissionError: 502,
    RemoteFailure: 502,
    MalformedResult: 502,
    AcquisitionTimeout: 504,
}


def status_for(exc: AnalyzerError) -> int:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 500


async def analyzer_error_handler(request: Request, exc: AnalyzerError) -> JSONResponse:
    status = status_for(exc)
    logger.error("Analysis error on %s (%s): %s", request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=status,
        content=ErrorResponse(error="Failed to analyze image", message=str(exc)).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnalyzerError, analyzer_error_handler)
