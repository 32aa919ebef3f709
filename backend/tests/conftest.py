"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from pigsight.config import Settings
from pigsight.models.detection import BoundingBox, Detection, DetectionRegion


def region(x: float, y: float, width: float, height: float, confidence: float = 0.9, category: str | None = None) -> DetectionRegion:
    return DetectionRegion(
        bounding_box=BoundingBox(x=x, y=y, width=width, height=height),
        confidence=confidence,
        category=category,
    )


def make_detection(**overrides: Any) -> Detection:
    """A four-legged, front-facing pig in the middle of a 500x500 canvas."""
    data: dict[str, Any] = {
        "head": region(150, 100, 100, 80, 0.9),
        "body": region(100, 150, 200, 150, 0.95),
        "legs": [
            region(120, 280, 30, 60, 0.85),
            region(170, 280, 30, 60, 0.85),
            region(220, 280, 30, 60, 0.85),
            region(270, 280, 30, 60, 0.85),
        ],
        "ears": [
            region(150, 90, 25, 35, 0.8),
            region(225, 90, 25, 35, 0.8),
        ],
        "tail": region(300, 200, 80, 20, 0.75),
        "overall": {
            "bounding_box": {"x": 100, "y": 90, "width": 280, "height": 250},
            "canvas": {"width": 500, "height": 500},
        },
        "detail_count": 8,
    }
    data.update(overrides)
    return Detection.model_validate(data)


def overall(x: float, y: float, width: float, height: float, canvas_w: float = 500, canvas_h: float = 500) -> dict[str, Any]:
    return {
        "bounding_box": {"x": x, "y": y, "width": width, "height": height},
        "canvas": {"width": canvas_w, "height": canvas_h},
    }


# Analyzer payloads, shaped like Content Understanding status envelopes.

REGIONS_ENVELOPE: dict[str, Any] = {
    "status": "Succeeded",
    "result": {
        "analyzerId": "prebuilt-imageAnalyzer",
        "description": {"captions": [{"text": "a cartoon pig on white paper", "confidence": 0.87}]},
        "objects": [
            {"category": "Pig Head", "boundingBox": {"x": 150, "y": 100, "width": 100, "height": 80}, "confidence": 0.9},
            {"category": "body", "boundingBox": {"x": 100, "y": 150, "width": 200, "height": 150}, "confidence": 0.95},
            {"category": "front leg", "boundingBox": {"x": 120, "y": 280, "width": 30, "height": 60}, "confidence": 0.85},
            {"category": "hind LEG", "boundingBox": {"x": 270, "y": 280, "width": 30, "height": 60}, "confidence": 0.85},
            {"category": "Ear", "boundingBox": {"x": 150, "y": 90, "width": 25, "height": 35}, "confidence": 0.8},
            {"category": "tail", "boundingBox": {"x": 300, "y": 200, "width": 80, "height": 20}, "confidence": 0.75},
        ],
    },
}

FIELDS_ENVELOPE: dict[str, Any] = {
    "status": "Succeeded",
    "result": {
        "analyzerId": "pig-feature-analyzer",
        "contents": [
            {
                "kind": "image",
                "fields": {
                    "Summary": {"type": "string", "valueString": "A simple drawing of a pig facing left."},
                    "VerticalPlacement": {"type": "string", "valueString": "Top"},
                    "Orientation": {"type": "string", "valueString": "Left"},
                    "LegCount": {"type": "integer", "valueInteger": 4},
                    "EarSize": {"type": "string", "valueString": "Normal"},
                    "TailLength": {"type": "number", "valueNumber": 0.1},
                    "DetailCount": {"type": "integer", "valueInteger": 2},
                },
            }
        ],
    },
}


@pytest.fixture
def detection() -> Detection:
    return make_detection()


@pytest.fixture
def analyzer_settings() -> Settings:
    return Settings(
        content_understanding_endpoint="https://pigs.cognitiveservices.azure.com/",
        content_understanding_key="test-key",
        analyzer_id="prebuilt-imageAnalyzer",
        poll_interval_seconds=0.0,
        max_poll_attempts=5,
    )
