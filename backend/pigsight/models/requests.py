"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pigsight.models.detection import PersonalityTrait


class ImageReference(BaseModel):
    """Where the analyzer should read the image from. URL preferred over data."""

    url: str | None = Field(default=None, description="Resolvable image URL")
    data: str | None = Field(default=None, description="Base64-encoded image bytes")

    def request_body(self) -> dict[str, str]:
        if self.url:
            return {"url": self.url}
        if self.data:
            return {"data": self.data}
        return {}


class AnalyzeRequest(BaseModel):
    image_url: str | None = Field(default=None, description="Public or SAS URL of the drawing")
    image_base64: str | None = Field(default=None, description="Base64-encoded drawing")
    participant_name: str | None = Field(default=None, description="Name in group mode")

    def image_reference(self) -> ImageReference:
        return ImageReference(url=self.image_url, data=self.image_base64)


class Participant(BaseModel):
    name: str = Field(..., description="Participant display name")
    traits: list[PersonalityTrait] = Field(default_factory=list)


class GroupTalliesRequest(BaseModel):
    participants: list[Participant] = Field(default_factory=list)
