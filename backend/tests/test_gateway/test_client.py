"""Tests for the analysis gateway submit/poll protocol.

The remote analyzer is replaced by an httpx.MockTransport handler.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from pigsight.config import Settings
from pigsight.gateway.client import AnalysisGateway
from pigsight.gateway.exceptions import (
    AcquisitionTimeout,
    ConfigurationError,
    MalformedResult,
    RemoteFailure,
    SubmissionError,
)
from pigsight.models.requests import ImageReference
from tests.conftest import FIELDS_ENVELOPE, REGIONS_ENVELOPE

IMAGE_URL = "https://blob.example.com/pig-images/drawing.jpg"


class FakeAnalyzer:
    """Records requests and answers with canned responses."""

    def __init__(self, statuses: list[dict], submit_status: int = 202, submit_headers: dict | None = None):
        self.statuses = list(statuses)
        self.submit_status = submit_status
        self.submit_headers = {"request-id": "job-123"} if submit_headers is None else submit_headers
        self.requests: list[httpx.Request] = []
        self.poll_count = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return httpx.Response(self.submit_status, headers=self.submit_headers, text="")
        if request.method == "PUT":
            return httpx.Response(201, json={"analyzerId": "pig-feature-analyzer", "status": "ready"})
        self.poll_count += 1
        status = self.statuses[min(self.poll_count, len(self.statuses)) - 1]
        return httpx.Response(200, json=status)


def _gateway(settings: Settings, analyzer: FakeAnalyzer) -> AnalysisGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(analyzer))
    return AnalysisGateway(settings, client=client)


class TestConfiguration:
    def test_missing_endpoint_raises_at_construction(self):
        with pytest.raises(ConfigurationError):
            AnalysisGateway(Settings(content_understanding_endpoint="", content_understanding_key="k"))

    def test_missing_key_raises_at_construction(self):
        with pytest.raises(ConfigurationError):
            AnalysisGateway(Settings(content_understanding_endpoint="https://x", content_understanding_key=""))


class TestSubmit:
    @pytest.mark.asyncio
    async def test_submit_request_shape(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE])
        gateway = _gateway(analyzer_settings, analyzer)

        job_id = await gateway.submit(ImageReference(url=IMAGE_URL))

        assert job_id == "job-123"
        request = analyzer.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/contentunderstanding/analyzers/prebuilt-imageAnalyzer:analyze"
        assert request.url.params["api-version"] == "2025-05-01-preview"
        assert request.headers["Ocp-Apim-Subscription-Key"] == "test-key"
        assert json.loads(request.read()) == {"url": IMAGE_URL}

    @pytest.mark.asyncio
    async def test_submit_base64_data(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE])
        gateway = _gateway(analyzer_settings, analyzer)

        await gateway.submit(ImageReference(data="aGVsbG8="))

        assert json.loads(analyzer.requests[0].read()) == {"data": "aGVsbG8="}

    @pytest.mark.asyncio
    async def test_empty_reference_rejected(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE])
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(SubmissionError):
            await gateway.submit(ImageReference())
        assert analyzer.requests == []

    @pytest.mark.asyncio
    async def test_rejected_submission(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE], submit_status=401)
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(SubmissionError) as exc_info:
            await gateway.acquire_detection(IMAGE_URL)
        assert exc_info.value.status_code == 401
        assert analyzer.poll_count == 0

    @pytest.mark.asyncio
    async def test_missing_job_id(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE], submit_headers={})
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(SubmissionError, match="request ID"):
            await gateway.acquire_detection(IMAGE_URL)
        assert analyzer.poll_count == 0


class TestPoll:
    @pytest.mark.asyncio
    async def test_immediate_success(self, analyzer_settings):
        analyzer = FakeAnalyzer([REGIONS_ENVELOPE])
        gateway = _gateway(analyzer_settings, analyzer)

        detection = await gateway.acquire_detection(IMAGE_URL)

        assert detection.head is not None
        assert len(detection.legs) == 2
        poll = analyzer.requests[1]
        assert poll.method == "GET"
        assert poll.url.path == "/contentunderstanding/analyzerResults/job-123"

    @pytest.mark.asyncio
    async def test_retries_until_success(self, analyzer_settings):
        analyzer = FakeAnalyzer(
            [{"status": "NotStarted"}, {"status": "Running"}, {"status": "Running"}, FIELDS_ENVELOPE]
        )
        gateway = _gateway(analyzer_settings, analyzer)

        with patch("pigsight.gateway.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
            detection = await gateway.acquire_detection(IMAGE_URL)

        assert detection.vertical_placement == "Top"
        assert analyzer.poll_count == 4
        assert sleep.await_count == 3
        sleep.assert_awaited_with(analyzer_settings.poll_interval_seconds)

    @pytest.mark.asyncio
    async def test_failed_status_stops_immediately(self, analyzer_settings):
        analyzer = FakeAnalyzer(
            [{"status": "Running"}, {"status": "Failed", "error": {"code": "InvalidImage", "message": "Image is corrupt"}}]
        )
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(RemoteFailure) as exc_info:
            await gateway.acquire_detection(IMAGE_URL)
        assert exc_info.value.message == "Image is corrupt"
        assert exc_info.value.job_id == "job-123"
        assert analyzer.poll_count == 2

    @pytest.mark.asyncio
    async def test_failed_without_message(self, analyzer_settings):
        analyzer = FakeAnalyzer([{"status": "Failed"}])
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(RemoteFailure, match="Unknown error"):
            await gateway.acquire_detection(IMAGE_URL)

    @pytest.mark.asyncio
    async def test_timeout_after_attempt_budget(self, analyzer_settings):
        analyzer = FakeAnalyzer([{"status": "Running"}])
        gateway = _gateway(analyzer_settings, analyzer)

        with patch("pigsight.gateway.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
            with pytest.raises(AcquisitionTimeout) as exc_info:
                await gateway.acquire_detection(IMAGE_URL)

        assert exc_info.value.attempts == analyzer_settings.max_poll_attempts
        assert analyzer.poll_count == analyzer_settings.max_poll_attempts
        assert sleep.await_count == analyzer_settings.max_poll_attempts - 1

    @pytest.mark.asyncio
    async def test_poll_http_error(self, analyzer_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return httpx.Response(202, headers={"apim-request-id": "job-9"})
            return httpx.Response(500, text="boom")

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        gateway = AnalysisGateway(analyzer_settings, client=client)

        with pytest.raises(RemoteFailure, match="500"):
            await gateway.acquire_detection(IMAGE_URL)

    @pytest.mark.asyncio
    async def test_malformed_success(self, analyzer_settings):
        analyzer = FakeAnalyzer([{"status": "Succeeded", "result": {}}])
        gateway = _gateway(analyzer_settings, analyzer)

        with pytest.raises(MalformedResult):
            await gateway.acquire_detection(IMAGE_URL)


class TestSetup:
    @pytest.mark.asyncio
    async def test_create_analyzer(self, analyzer_settings):
        analyzer = FakeAnalyzer([])
        client = httpx.AsyncClient(transport=httpx.MockTransport(analyzer))
        gateway = AnalysisGateway(analyzer_settings, client=client, analyzer_id="pig-feature-analyzer")

        body = await gateway.create_analyzer()

        assert body["analyzerId"] == "pig-feature-analyzer"
        request = analyzer.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/contentunderstanding/analyzers/pig-feature-analyzer"

    @pytest.mark.asyncio
    async def test_check_connection(self, analyzer_settings):
        assert await _gateway(analyzer_settings, FakeAnalyzer([])).check_connection() is True
        rejected = FakeAnalyzer([], submit_status=403)
        assert await _gateway(analyzer_settings, rejected).check_connection() is False

    @pytest.mark.asyncio
    async def test_close_owned_client(self, analyzer_settings):
        async with AnalysisGateway(analyzer_settings) as gateway:
            assert not gateway.client.is_closed
        assert gateway.client.is_closed
