"""Core detection data model: what the analyzer found in a drawing."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VerticalPlacement = Literal["Top", "Middle", "Bottom"]
Orientation = Literal["Left", "Right", "Front"]
EarSize = Literal["Large", "Normal"]


class TraitCategory(str, enum.Enum):
    PLACEMENT = "placement"
    ORIENTATION = "orientation"
    DETAILS = "details"
    LEGS = "legs"
    EARS = "ears"
    TAIL = "tail"


class BoundingBox(BaseModel):
    """Top-left origin box. Width/height may be zero or negative in bad input."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)


class DetectionRegion(BaseModel):
    bounding_box: BoundingBox
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    category: str | None = None


class Canvas(BaseModel):
    width: float = 1000.0
    height: float = 1000.0


class OverallBounds(BaseModel):
    bounding_box: BoundingBox
    canvas: Canvas = Field(default_factory=Canvas)


class Detection(BaseModel):
    """Full analysis snapshot for one image.

    The direct scalar fields (``vertical_placement`` .. ``tail_length``) come
    from a custom analyzer that pre-computes semantics. When set they win over
    anything derived from the region geometry.
    """

    overall: OverallBounds
    head: DetectionRegion | None = None
    body: DetectionRegion | None = None
    tail: DetectionRegion | None = None
    legs: list[DetectionRegion] = Field(default_factory=list)
    ears: list[DetectionRegion] = Field(default_factory=list)
    detail_count: int = 0

    # Direct fields
    vertical_placement: VerticalPlacement | None = None
    orientation: Orientation | None = None
    leg_count: int | None = None
    ear_size: EarSize | None = None
    tail_length: float | None = Field(default=None, ge=0.0, le=1.0)

    # Validation only, never read by the rules
    description: str | None = None
    description_confidence: float | None = None


class Evidence(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str  # e.g. "placement=Top", "legs=3"
    value: str | int | float
    confidence: float | None = None


class PersonalityTrait(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: TraitCategory
    statement: str
    evidence: Evidence
