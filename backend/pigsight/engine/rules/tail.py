"""Tail: only a notably long tail produces a trait.

Direct:   tail_length in [0, 1]; > 0.4 -> trait
Fallback: longest tail side / body width > 0.4,
          or / longest canvas side > 0.15 when no body was found
"""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.measurement import Absent, Derived, Direct, Measurement, measure
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory
from pigsight.utils.geometry import safe_ratio

_THRESHOLD_BY_BASIS = {
    "body": thresholds.TAIL_TO_BODY,
    "canvas": thresholds.TAIL_TO_CANVAS,
}


def _tail_ratio(detection: Detection) -> Measurement:
    if detection.tail is None:
        return Absent("no tail detected")

    length = detection.tail.bounding_box.longest_side
    if detection.body is not None:
        basis, reference = "body", detection.body.bounding_box.width
    else:
        canvas = detection.overall.canvas
        basis, reference = "canvas", max(canvas.width, canvas.height)

    ratio = safe_ratio(length, reference)
    if ratio is None:
        return Absent(f"{basis} size is not positive")
    return Derived(ratio, basis=basis)


def _long(value: str | float) -> PersonalityTrait:
    return PersonalityTrait(
        category=TraitCategory.TAIL,
        statement=get_statement("tail", "Long"),
        evidence=Evidence(key="tail=Long", value=value),
    )


@rule(category=TraitCategory.TAIL, description="Relative length of the tail")
def tail_length(detection: Detection) -> PersonalityTrait | None:
    m = measure(detection.tail_length, lambda: _tail_ratio(detection))

    if isinstance(m, Direct):
        return _long(m.value) if m.value > thresholds.TAIL_TO_BODY else None
    if isinstance(m, Derived) and m.value > _THRESHOLD_BY_BASIS[m.basis]:
        if m.basis == "body":
            return _long(f"{round(m.value * 100)}% of body")
        return _long("Long")
    return None
