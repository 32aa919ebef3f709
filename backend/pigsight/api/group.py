"""POST /api/group/tallies: compare traits across a group of participants."""

from __future__ import annotations

from fastapi import APIRouter

from pigsight.engine.statements import DISCUSSION_PROMPTS
from pigsight.engine.tallies import tally_participants
from pigsight.models.requests import GroupTalliesRequest
from pigsight.models.responses import GroupTalliesResponse

router = APIRouter()


@router.post("/group/tallies", response_model=GroupTalliesResponse)
async def group_tallies(req: GroupTalliesRequest) -> GroupTalliesResponse:
    tallies = tally_participants([p.traits for p in req.participants])
    return GroupTalliesResponse(
        tallies=tallies,
        participant_count=len(req.participants),
        discussion_prompts=list(DISCUSSION_PROMPTS),
    )
