"""Details: how many distinguishable parts were drawn. >5 = Many."""

from __future__ import annotations

from pigsight.engine import thresholds
from pigsight.engine.registry import rule
from pigsight.engine.statements import get_statement
from pigsight.models.detection import Detection, Evidence, PersonalityTrait, TraitCategory


@rule(category=TraitCategory.DETAILS, description="Level of detail in the drawing")
def detail_level(detection: Detection) -> PersonalityTrait:
    count = detection.detail_count
    verdict = "Many" if count > thresholds.DETAIL_COUNT else "Few"
    return PersonalityTrait(
        category=TraitCategory.DETAILS,
        statement=get_statement("details", verdict),
        evidence=Evidence(key=f"details={verdict}", value=count),
    )
