from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict, Field

from matches_api.domain.matches import Match
from matches_api.repositories.match_store import MatchStore

router = APIRouter(prefix="/matches", tags=["matches"])

NOT_FOUND = "Match not found"


class MatchPayload(BaseModel):
    """Request body for create/replace. Any ``id`` sent by the client is ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    # null text decodes to "", counters and flag must carry their exact JSON type
    home_team: Optional[str] = Field("", alias="homeTeam")
    away_team: Optional[str] = Field("", alias="awayTeam")
    match_date: Optional[str] = Field("", alias="matchDate")
    home_goals: int = Field(0, ge=0, strict=True, alias="homeGoals")
    away_goals: int = Field(0, ge=0, strict=True, alias="awayGoals")
    yellow_cards: int = Field(0, ge=0, strict=True, alias="yellowCards")
    red_cards: int = Field(0, ge=0, strict=True, alias="redCards")
    extra_time: bool = Field(False, strict=True, alias="extraTime")

    def to_match(self) -> Match:
        return Match(
            home_team=self.home_team or "",
            away_team=self.away_team or "",
            match_date=self.match_date or "",
            home_goals=self.home_goals,
            away_goals=self.away_goals,
            yellow_cards=self.yellow_cards,
            red_cards=self.red_cards,
            extra_time=self.extra_time,
        )


def _get_match_store(request: Request) -> MatchStore:
    store = getattr(getattr(request.app, "state", None), "match_store", None)
    if store is None:
        raise RuntimeError("MatchStore not configured")
    return store


def _found(match: Match | None) -> dict:
    if match is None:
        raise HTTPException(404, NOT_FOUND)
    return match.to_dict()


@router.post("", status_code=201)
def create_match(payload: MatchPayload, request: Request) -> dict:
    return _get_match_store(request).create(payload.to_match()).to_dict()


@router.get("")
def list_matches(request: Request) -> List[dict]:
    return [match.to_dict() for match in _get_match_store(request).get_all()]


@router.get("/{match_id}")
def get_match(match_id: int, request: Request) -> dict:
    return _found(_get_match_store(request).get(match_id))


@router.put("/{match_id}")
def update_match(match_id: int, payload: MatchPayload, request: Request) -> dict:
    return _found(_get_match_store(request).update(match_id, payload.to_match()))


@router.delete("/{match_id}", status_code=204, response_class=Response)
def delete_match(match_id: int, request: Request) -> Response:
    if not _get_match_store(request).delete(match_id):
        raise HTTPException(404, NOT_FOUND)
    return Response(status_code=204)


@router.patch("/{match_id}/goals")
def register_goal(match_id: int, request: Request) -> dict:
    return _found(_get_match_store(request).register_goal(match_id))


@router.patch("/{match_id}/yellowcards")
def register_yellow_card(match_id: int, request: Request) -> dict:
    return _found(_get_match_store(request).register_yellow_card(match_id))


@router.patch("/{match_id}/redcards")
def register_red_card(match_id: int, request: Request) -> dict:
    return _found(_get_match_store(request).register_red_card(match_id))


@router.patch("/{match_id}/extratime")
def set_extra_time(match_id: int, request: Request) -> dict:
    return _found(_get_match_store(request).set_extra_time(match_id))
