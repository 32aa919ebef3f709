"""Job id extraction from an analyze submission response.

The service is not consistent about where it puts the id, so extraction is an
ordered list of strategies tried in turn; the first non-empty result wins.
"""

from __future__ import annotations

from typing import Callable, Optional
from urllib.parse import urlsplit

import httpx

Strategy = Callable[[httpx.Response], Optional[str]]


def _header(name: str) -> Strategy:
    def extract(response: httpx.Response) -> str | None:
        return response.headers.get(name) or None

    extract.__name__ = f"header:{name}"
    return extract


def _operation_location(response: httpx.Response) -> str | None:
    location = response.headers.get("Operation-Location")
    if not location:
        return None
    path = urlsplit(location).path
    return path.rstrip("/").rsplit("/", 1)[-1] or None


def _body_id(response: httpx.Response) -> str | None:
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("id"):
        return str(body["id"])
    return None


JOB_ID_STRATEGIES: tuple[Strategy, ...] = (
    _header("request-id"),
    _header("apim-request-id"),
    _operation_location,
    _body_id,
)


def extract_job_id(
    response: httpx.Response,
    strategies: tuple[Strategy, ...] = JOB_ID_STRATEGIES,
) -> str | None:
    for strategy in strategies:
        job_id = strategy(response)
        if job_id:
            return job_id
    return None
