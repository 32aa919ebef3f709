"""Legs: exactly four is "secure"; any other count (0-3, or 5+) is "change"."""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.measurement import Derived, measure
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory


@rule(category=TraitCategory.LEGS, description="Number of legs drawn")
def leg_count(detection: Detection) -> PersonalityTrait:
    m = measure(detection.leg_count, lambda: Derived(len(detection.legs), basis="regions"))
    count = int(m.value)
    verdict = "four" if count == thresholds.SECURE_LEG_COUNT else "lessThanFour"
    return PersonalityTrait(
        category=TraitCategory.LEGS,
        statement=get_statement("legs", verdict),
        evidence=Evidence(key=f"legs={count}", value=count),
    )
