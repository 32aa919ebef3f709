"""Orientation: which way the pig faces.

Direct:   orientation (Left / Right / Front)
Fallback: head center vs body center on x. An offset larger than 20% of body
width picks a side by its sign (negative = Left). With no head+body pair, a
pair of ears means a front view. Nothing usable defaults to Front.
"""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.measurement import Absent, Derived, Direct, Measurement, measure
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory

_NO_HEAD_OR_BODY = "no head or body"


def _head_offset(detection: Detection) -> Measurement:
    head, body = detection.head, detection.body
    if head is None and body is None:
        return Absent(_NO_HEAD_OR_BODY)
    if head is not None and body is not None:
        head_x, _ = head.bounding_box.center
        body_x, _ = body.bounding_box.center
        return Derived(head_x - body_x, basis="body")
    if len(detection.ears) >= 2:
        return Derived(0.0, basis="ears")
    return Absent("head and body not both present")


@rule(category=TraitCategory.ORIENTATION, description="Direction the pig is facing")
def orientation(detection: Detection) -> PersonalityTrait:
    m = measure(detection.orientation, lambda: _head_offset(detection))

    value: str | None = None
    if isinstance(m, Direct):
        verdict = m.value
    elif isinstance(m, Derived) and m.basis == "body":
        body_width = detection.body.bounding_box.width
        verdict = "Front"
        if abs(m.value) > body_width * thresholds.ORIENTATION_OFFSET_FRACTION:
            verdict = "Left" if m.value < 0 else "Right"
    else:
        verdict = "Front"
        if isinstance(m, Absent) and m.reason == _NO_HEAD_OR_BODY:
            value = "Front (default)"

    return PersonalityTrait(
        category=TraitCategory.ORIENTATION,
        statement=get_statement("orientation", verdict, default="Front"),
        evidence=Evidence(key=f"orientation={verdict}", value=value or verdict),
    )
