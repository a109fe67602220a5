"""Pydantic schemas for the last-game participants endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LastGameRequest(BaseModel):
    """Body of ``POST /api/get-last-game-participants``.

    Fields are optional here so a missing field yields the endpoint's own 400
    message rather than a generic validation error.
    """

    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")
    region: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ParticipantResponse(BaseModel):
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")
    region: str
    puuid: str
    profile_icon_url: str = Field(..., alias="profileIconUrl")

    model_config = ConfigDict(populate_by_name=True)
