"""Placement: where on the page the pig sits.

Direct:   vertical_placement (Top / Middle / Bottom)
Fallback: vertical centroid of the overall box / canvas height
  ratio < 0.33  -> Top
  ratio > 0.67  -> Bottom
  otherwise     -> Middle   (0.33 and 0.67 themselves land here)
"""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.measurement import Absent, Derived, Direct, Measurement, measure
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory
from pigsight.utils.geometry import safe_ratio


def _relative_y(detection: Detection) -> Measurement:
    bbox = detection.overall.bounding_box
    _, centroid_y = bbox.center
    ratio = safe_ratio(centroid_y, detection.overall.canvas.height)
    if ratio is None:
        return Absent("canvas height is not positive")
    return Derived(ratio, basis="canvas")


def _bucket(ratio: float) -> str:
    if ratio < thresholds.PLACEMENT_TOP:
        return "Top"
    if ratio > thresholds.PLACEMENT_BOTTOM:
        return "Bottom"
    return "Middle"


@rule(category=TraitCategory.PLACEMENT, description="Vertical position on the page")
def placement(detection: Detection) -> PersonalityTrait:
    m = measure(detection.vertical_placement, lambda: _relative_y(detection))

    if isinstance(m, Direct):
        verdict = m.value
        value: str | float = m.value
    elif isinstance(m, Derived):
        verdict = _bucket(m.value)
        value = round(m.value, 2)
    else:
        verdict = "Middle"
        value = "Middle (unmeasurable)"

    return PersonalityTrait(
        category=TraitCategory.PLACEMENT,
        statement=get_statement("placement", verdict, default="Middle"),
        evidence=Evidence(key=f"placement={verdict}", value=value),
    )
