"""Ears: only notably large ears produce a trait.

Direct:   ear_size; Large -> trait, Normal -> nothing
Fallback: mean ear height / head height > 0.3,
          or mean ear height / canvas height > 0.1 when no head was found
"""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.measurement import Absent, Derived, Direct, Measurement, measure
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory
from pigsight.utils.geometry import mean_height, safe_ratio

_THRESHOLD_BY_BASIS = {
    "head": thresholds.EAR_TO_HEAD,
    "canvas": thresholds.EAR_TO_CANVAS,
}


def _ear_ratio(detection: Detection) -> Measurement:
    if not detection.ears:
        return Absent("no ears detected")

    avg_height = mean_height([ear.bounding_box for ear in detection.ears])
    if detection.head is not None:
        basis, reference = "head", detection.head.bounding_box.height
    else:
        basis, reference = "canvas", detection.overall.canvas.height

    ratio = safe_ratio(avg_height, reference)
    if ratio is None:
        return Absent(f"{basis} height is not positive")
    return Derived(ratio, basis=basis)


def _large(value: str | float) -> PersonalityTrait:
    return PersonalityTrait(
        category=TraitCategory.EARS,
        statement=get_statement("ears", "Large"),
        evidence=Evidence(key="ears=Large", value=value),
    )


@rule(category=TraitCategory.EARS, description="Relative size of the ears")
def ear_size(detection: Detection) -> PersonalityTrait | None:
    m = measure(detection.ear_size, lambda: _ear_ratio(detection))

    if isinstance(m, Direct):
        return _large("Large") if m.value == "Large" else None
    if isinstance(m, Derived) and m.value > _THRESHOLD_BY_BASIS[m.basis]:
        if m.basis == "head":
            return _large(f"{round(m.value * 100)}% of head")
        return _large("Large")
    return None
