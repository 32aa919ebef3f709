"""Azure AI Content Understanding gateway: submit, poll, transform.

    POST {endpoint}/contentunderstanding/analyzers/{analyzer_id}:analyze?api-version=...
        body {"url": ...} or {"data": <base64>}
    GET  {endpoint}/contentunderstanding/analyzerResults/{job_id}?api-version=...
        -> {"status": NotStarted|Running|Succeeded|Failed, "result"?, "error"?}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from pigsight.config import Settings
from pigsight.gateway.analyzer_definition import custom_analyzer_definition
from pigsight.gateway.exceptions import (
    AcquisitionTimeout,
    AnalyzerError,
    ConfigurationError,
    RemoteFailure,
    SubmissionError,
)
from pigsight.gateway.job_id import extract_job_id
from pigsight.gateway.transform import transform_to_detection
from pigsight.models.detection import Detection
from pigsight.models.requests import ImageReference

logger = logging.getLogger(__name__)

_KEY_HEADER = "Ocp-Apim-Subscription-Key"

STATUS_SUCCEEDED = "Succeeded"
STATUS_FAILED = "Failed"


class AnalysisGateway:
    """Turns an image reference into a Detection via the remote analyzer.

    One gateway can serve many concurrent acquisitions; the only shared state
    is the HTTP connection pool.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        analyzer_id: str | None = None,
    ):
        """Initialize the gateway.

        Args:
            settings: Application settings with the analyzer endpoint and key
            client: Optional pre-built HTTP client (tests inject a mock transport)
            analyzer_id: Overrides ``settings.analyzer_id``

        Raises:
            ConfigurationError: If the endpoint or key is missing
        """
        if not settings.content_understanding_endpoint or not settings.content_understanding_key:
            raise ConfigurationError(
                "Azure Content Understanding is not configured. "
                "Set CONTENT_UNDERSTANDING_ENDPOINT and CONTENT_UNDERSTANDING_KEY."
            )
        self.settings = settings
        self.endpoint = settings.content_understanding_endpoint.rstrip("/")
        self.analyzer_id = analyzer_id or settings.analyzer_id
        self.poll_interval = settings.poll_interval_seconds
        self.max_attempts = settings.max_poll_attempts
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.request_timeout_seconds)

    async def __aenter__(self) -> AnalysisGateway:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if the gateway created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.debug("Closed analyzer HTTP client")

    # ── URLs ──

    def _params(self) -> dict[str, str]:
        return {"api-version": self.settings.api_version}

    def _headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {_KEY_HEADER: self.settings.content_understanding_key}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _analyze_url(self) -> str:
        return f"{self.endpoint}/contentunderstanding/analyzers/{self.analyzer_id}:analyze"

    def _result_url(self, job_id: str) -> str:
        return f"{self.endpoint}/contentunderstanding/analyzerResults/{job_id}"

    def _analyzer_url(self) -> str:
        return f"{self.endpoint}/contentunderstanding/analyzers/{self.analyzer_id}"

    # ── Protocol ──

    async def acquire_detection(self, image: ImageReference | str) -> Detection:
        """Submit an image, wait for the analysis, and return it as a Detection.

        Args:
            image: Image URL, or an ImageReference with a URL or base64 data

        Returns:
            Detection built from the analyzer result

        Raises:
            SubmissionError: Request rejected or no job id in the response
            RemoteFailure: Job reached the Failed state
            AcquisitionTimeout: Polling budget exhausted
            MalformedResult: Job succeeded without usable regions or fields
        """
        if isinstance(image, str):
            image = ImageReference(url=image)

        job_id = await self.submit(image)
        envelope = await self.poll(job_id)
        return transform_to_detection(envelope)

    async def submit(self, image: ImageReference) -> str:
        """Send the analyze request and return the job id."""
        body = image.request_body()
        if not body:
            raise SubmissionError("Either an image url or image data must be provided")

        try:
            response = await self.client.post(
                self._analyze_url(),
                params=self._params(),
                headers=self._headers(json_body=True),
                json=body,
            )
        except httpx.HTTPError as e:
            raise SubmissionError(f"Failed to submit analysis request: {e}") from e

        if response.is_error:
            raise SubmissionError(
                f"Failed to submit analysis request: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        job_id = extract_job_id(response)
        if not job_id:
            raise SubmissionError(
                "Failed to extract request ID from response",
                status_code=response.status_code,
            )

        logger.info("Submitted image to analyzer %s (job %s)", self.analyzer_id, job_id)
        return job_id

    async def poll(self, job_id: str) -> dict[str, Any]:
        """Poll job status until it succeeds, fails, or the attempt budget runs out.

        Returns:
            The ``Succeeded`` status envelope
        """
        url = self._result_url(job_id)

        for attempt in range(1, self.max_attempts + 1):
            try:
                response = await self.client.get(
                    url, params=self._params(), headers=self._headers()
                )
            except httpx.HTTPError as e:
                raise RemoteFailure(job_id, f"Failed to get analysis results: {e}") from e

            if response.is_error:
                raise RemoteFailure(
                    job_id,
                    f"Failed to get analysis results: {response.status_code} {response.text}",
                )

            try:
                envelope = response.json()
            except ValueError as e:
                raise RemoteFailure(job_id, "Analysis status response is not valid JSON") from e

            status = envelope.get("status") if isinstance(envelope, dict) else None

            if status == STATUS_SUCCEEDED:
                logger.info("Analysis job %s succeeded after %d attempt(s)", job_id, attempt)
                return envelope

            if status == STATUS_FAILED:
                error = envelope.get("error") or {}
                message = error.get("message") if isinstance(error, dict) else None
                raise RemoteFailure(job_id, message or "Unknown error")

            logger.debug(
                "Job %s status %s (attempt %d/%d), waiting %.1fs",
                job_id,
                status,
                attempt,
                self.max_attempts,
                self.poll_interval,
            )
            if attempt < self.max_attempts:
                await asyncio.sleep(self.poll_interval)

        raise AcquisitionTimeout(job_id, self.max_attempts)

    # ── Setup / diagnostics ──

    async def create_analyzer(self, definition: dict[str, Any] | None = None) -> dict[str, Any]:
        """Create or replace the analyzer at ``analyzer_id`` with a custom schema."""
        definition = definition or custom_analyzer_definition()
        try:
            response = await self.client.put(
                self._analyzer_url(),
                params=self._params(),
                headers=self._headers(json_body=True),
                json=definition,
            )
        except httpx.HTTPError as e:
            raise SubmissionError(f"Failed to create analyzer: {e}") from e

        if response.is_error:
            raise SubmissionError(
                f"Failed to create analyzer: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        logger.info("Created analyzer %s", self.analyzer_id)
        return response.json() if response.content else {}

    async def check_connection(self) -> bool:
        """True when the analyzer accepts a submission of the probe image."""
        try:
            await self.submit(ImageReference(url=self.settings.probe_image_url))
        except AnalyzerError as e:
            logger.error("Analyzer connection test failed: %s", e)
            return False
        return True
