"""Group mode: count each participant's verdicts per category.

Verdicts are read back from the evidence keys (``placement=Top``, ``legs=3``),
so a tally only needs the trait lists, not the original detections.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from pigsight.engine import thresholds
from pigsight.models.detection import PersonalityTrait


class PlacementCounts(BaseModel):
    top: int = 0
    middle: int = 0
    bottom: int = 0


class OrientationCounts(BaseModel):
    left: int = 0
    right: int = 0
    front: int = 0


class DetailCounts(BaseModel):
    many: int = 0
    few: int = 0


class LegCounts(BaseModel):
    less_than_four: int = 0
    four: int = 0


class GroupTallies(BaseModel):
    placement: PlacementCounts = Field(default_factory=PlacementCounts)
    orientation: OrientationCounts = Field(default_factory=OrientationCounts)
    details: DetailCounts = Field(default_factory=DetailCounts)
    legs: LegCounts = Field(default_factory=LegCounts)


def evidence_verdicts(traits: Iterable[PersonalityTrait]) -> dict[str, str]:
    """{"placement": "Top", "legs": "4", ...} from ``category=Value`` keys."""
    verdicts: dict[str, str] = {}
    for trait in traits:
        category, sep, value = trait.evidence.key.partition("=")
        if sep:
            verdicts[category] = value
    return verdicts


def tally_participants(participants: Sequence[Sequence[PersonalityTrait]]) -> GroupTallies:
    tallies = GroupTallies()

    for traits in participants:
        verdicts = evidence_verdicts(traits)

        placement = verdicts.get("placement", "Middle")
        if placement == "Top":
            tallies.placement.top += 1
        elif placement == "Bottom":
            tallies.placement.bottom += 1
        else:
            tallies.placement.middle += 1

        orientation = verdicts.get("orientation", "Front")
        if orientation == "Left":
            tallies.orientation.left += 1
        elif orientation == "Right":
            tallies.orientation.right += 1
        else:
            tallies.orientation.front += 1

        if verdicts.get("details") == "Many":
            tallies.details.many += 1
        else:
            tallies.details.few += 1

        try:
            legs = int(verdicts.get("legs", "0"))
        except ValueError:
            legs = 0
        # Group counts bucket on < 4 only, so 5+ legs count as four here.
        if legs < thresholds.SECURE_LEG_COUNT:
            tallies.legs.less_than_four += 1
        else:
            tallies.legs.four += 1

    return tallies
