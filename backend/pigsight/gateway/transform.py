"""Analyzer result payload -> Detection.

Two payload shapes are understood, picked by what the payload contains:

  regions  result.objects[] and/or result.contents[].sections[].elements[].regions[]
           each {category, boundingBox{x, y, width, height}, confidence}
  fields   result.contents[].fields{Name: {type, valueString|valueNumber|valueInteger}}
           pre-computed by a custom analyzer (VerticalPlacement, LegCount, ...)

Either, both, or a mix is fine. Field values are copied onto the Detection's
direct fields, which the rules prefer over region geometry.
"""

from __future__ import annotations

import logging
from typing import Any

from pigsight.gateway.exceptions import MalformedResult
from pigsight.models.detection import (
    BoundingBox,
    Canvas,
    Detection,
    DetectionRegion,
    OverallBounds,
)
from pigsight.utils.geometry import union_box

logger = logging.getLogger(__name__)

# Fallback reference frame when the analyzer does not report one.
DEFAULT_CANVAS_SIZE = 1000.0

# Anatomy label -> substrings matched case-insensitively against region categories.
_HEAD_LABELS = ("head", "face")
_BODY_LABELS = ("body", "torso")
_LEG_LABELS = ("leg", "foot")
_EAR_LABELS = ("ear",)
_TAIL_LABELS = ("tail",)

_PLACEMENTS = ("Top", "Middle", "Bottom")
_ORIENTATIONS = ("Left", "Right", "Front")
_EAR_SIZES = ("Large", "Normal")

_DESCRIPTION_FIELDS = ("summary", "description")


# ── Small coercion helpers ──


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _bounding_box(raw: Any) -> BoundingBox | None:
    if not isinstance(raw, dict):
        return None
    return BoundingBox(
        x=_number(raw.get("x")) or 0.0,
        y=_number(raw.get("y")) or 0.0,
        width=_number(raw.get("width")) or 0.0,
        height=_number(raw.get("height")) or 0.0,
    )


def _region(raw: Any) -> DetectionRegion | None:
    if not isinstance(raw, dict):
        return None
    box = _bounding_box(raw.get("boundingBox"))
    if box is None:
        return None
    confidence = _number(raw.get("confidence")) or 0.0
    category = raw.get("category")
    return DetectionRegion(
        bounding_box=box,
        confidence=min(max(confidence, 0.0), 1.0),
        category=str(category) if category is not None else None,
    )


def _matches(region: DetectionRegion, labels: tuple[str, ...]) -> bool:
    category = (region.category or "").lower()
    return any(label in category for label in labels)


# ── Payload walking ──


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _contents(result: dict[str, Any]) -> list[dict[str, Any]]:
    contents = result.get("contents")
    if not isinstance(contents, list):
        return []
    return [c for c in contents if isinstance(c, dict)]


def _raw_regions(result: dict[str, Any]) -> list[Any] | None:
    """Every raw region in the payload, or None when no region list exists."""
    found = False
    raw: list[Any] = []

    objects = result.get("objects")
    if isinstance(objects, list):
        found = True
        raw.extend(objects)

    for content in _contents(result):
        for section in _list(content.get("sections")):
            if not isinstance(section, dict):
                continue
            for element in _list(section.get("elements")):
                if isinstance(element, dict) and isinstance(element.get("regions"), list):
                    found = True
                    raw.extend(element["regions"])

    return raw if found else None


def _field_value(envelope: Any) -> Any:
    if not isinstance(envelope, dict):
        return envelope
    for key in ("valueString", "valueNumber", "valueInteger", "valueBoolean"):
        if key in envelope:
            return envelope[key]
    return None


def _raw_fields(result: dict[str, Any]) -> dict[str, Any]:
    """Field values keyed by lower-cased field name; first content wins."""
    fields: dict[str, Any] = {}
    for content in _contents(result):
        raw = content.get("fields")
        if not isinstance(raw, dict):
            continue
        for name, envelope in raw.items():
            fields.setdefault(str(name).lower(), _field_value(envelope))
    return fields


def _vocabulary(value: Any, allowed: tuple[str, ...], field_name: str) -> str | None:
    if value is None:
        return None
    for option in allowed:
        if str(value).strip().lower() == option.lower():
            return option
    logger.warning("Dropping %s=%r: expected one of %s", field_name, value, allowed)
    return None


def _count(value: Any, field_name: str) -> int | None:
    number = _number(value)
    if number is None:
        if value is not None:
            logger.warning("Dropping %s=%r: not a number", field_name, value)
        return None
    if number < 0:
        logger.warning("Dropping %s=%r: negative", field_name, value)
        return None
    if not number.is_integer():
        logger.warning("Dropping %s=%r: not a whole number", field_name, value)
        return None
    return int(number)


def _fraction(value: Any, field_name: str) -> float | None:
    number = _number(value)
    if number is None:
        if value is not None:
            logger.warning("Dropping %s=%r: not a number", field_name, value)
        return None
    if not 0.0 <= number <= 1.0:
        logger.warning("Dropping %s=%r: outside [0, 1]", field_name, value)
        return None
    return number


def _direct_fields(fields: dict[str, Any]) -> dict[str, Any]:
    direct = {
        "vertical_placement": _vocabulary(
            fields.get("verticalplacement"), _PLACEMENTS, "VerticalPlacement"
        ),
        "orientation": _vocabulary(fields.get("orientation"), _ORIENTATIONS, "Orientation"),
        "leg_count": _count(fields.get("legcount"), "LegCount"),
        "ear_size": _vocabulary(fields.get("earsize"), _EAR_SIZES, "EarSize"),
        "tail_length": _fraction(fields.get("taillength"), "TailLength"),
        "detail_count": _count(fields.get("detailcount"), "DetailCount"),
    }
    return {k: v for k, v in direct.items() if v is not None}


def _description(result: dict[str, Any], fields: dict[str, Any]) -> tuple[str | None, float | None]:
    description = result.get("description")
    if isinstance(description, dict):
        for caption in _list(description.get("captions")):
            if isinstance(caption, dict) and caption.get("text"):
                return str(caption["text"]), _number(caption.get("confidence"))

    for name in _DESCRIPTION_FIELDS:
        value = fields.get(name)
        if isinstance(value, str) and value.strip():
            return value, None
    return None, None


# ── Public entry point ──


def transform_to_detection(envelope: dict[str, Any]) -> Detection:
    """Build a Detection from a ``Succeeded`` status envelope.

    Raises:
        MalformedResult: no result, or neither a region list nor any known field
    """
    result = envelope.get("result") if isinstance(envelope, dict) else None
    if not isinstance(result, dict):
        raise MalformedResult("No result in analysis response")

    raw_regions = _raw_regions(result)
    fields = _raw_fields(result)
    direct = _direct_fields(fields)

    if raw_regions is None and not direct:
        raise MalformedResult(
            "Analysis result has neither a region list nor any recognised scalar fields"
        )

    regions = [r for r in (_region(raw) for raw in raw_regions or []) if r is not None]

    canvas_width = canvas_height = DEFAULT_CANVAS_SIZE
    overall_box = union_box([r.bounding_box for r in regions])
    if overall_box is not None:
        canvas_width = max(overall_box.x + overall_box.width, canvas_width)
        canvas_height = max(overall_box.y + overall_box.height, canvas_height)
    else:
        overall_box = BoundingBox(x=0.0, y=0.0, width=canvas_width, height=canvas_height)

    description, description_confidence = _description(result, fields)

    detection = Detection(
        overall=OverallBounds(
            bounding_box=overall_box,
            canvas=Canvas(width=canvas_width, height=canvas_height),
        ),
        head=next((r for r in regions if _matches(r, _HEAD_LABELS)), None),
        body=next((r for r in regions if _matches(r, _BODY_LABELS)), None),
        tail=next((r for r in regions if _matches(r, _TAIL_LABELS)), None),
        legs=[r for r in regions if _matches(r, _LEG_LABELS)],
        ears=[r for r in regions if _matches(r, _EAR_LABELS)],
        detail_count=len(regions),
        description=description,
        description_confidence=description_confidence,
    )
    if direct:
        detection = detection.model_copy(update=direct)

    logger.debug(
        "Transformed result: %d regions, direct fields %s",
        len(regions),
        sorted(direct),
    )
    return detection
