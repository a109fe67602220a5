"""Pydantic schemas for the batch status check endpoint.

Field names follow the browser client's camelCase contract.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import StatusKind


class PlayerEntry(BaseModel):
    """One player in a status check request."""

    id: Union[int, str] = Field(..., description="Caller-side identifier echoed back")
    region: str = Field(..., description="Platform code, e.g. EUW1")
    game_name: str = Field(..., alias="gameName", min_length=1)
    tag_line: str = Field(..., alias="tagLine", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class StatusCheckRequest(BaseModel):
    """Body of ``POST /check-status``."""

    players: List[PlayerEntry]
    champ_to_track: Optional[str] = Field(
        None, alias="champToTrack", description="Champion to watch for in bans"
    )

    model_config = ConfigDict(populate_by_name=True)


class RosterEntryResponse(BaseModel):
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")
    champion_played: str = Field(..., alias="championPlayed")

    model_config = ConfigDict(populate_by_name=True)


class LiveGameDetailsResponse(BaseModel):
    """Live game section of an IN_GAME status."""

    game_start_time: int = Field(..., alias="gameStartTime")
    elapsed_seconds: int = Field(..., alias="elapsedSeconds", ge=0)
    team1_bans: List[str] = Field(default_factory=list, alias="team1Bans")
    team2_bans: List[str] = Field(default_factory=list, alias="team2Bans")
    team1: List[RosterEntryResponse] = Field(default_factory=list)
    team2: List[RosterEntryResponse] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class LastMatchDetailsResponse(BaseModel):
    """Most recent completed match of a HIGH_RISK or LOW_RISK status."""

    win: bool
    champion_played: str = Field(..., alias="championPlayed")
    kda: str
    team1_bans: List[str] = Field(default_factory=list, alias="team1Bans")
    team2_bans: List[str] = Field(default_factory=list, alias="team2Bans")
    team1: List[RosterEntryResponse] = Field(default_factory=list)
    team2: List[RosterEntryResponse] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class PlayerStatusResponse(BaseModel):
    """Status of one player, tagged with the caller's id."""

    id: Union[int, str]
    status: StatusKind
    status_message: str = Field(..., alias="statusMessage")
    is_champ_banned: Optional[bool] = Field(None, alias="isChampBanned")
    profile_icon_url: Optional[str] = Field(None, alias="profileIconUrl")
    live_game_details: Optional[LiveGameDetailsResponse] = Field(
        None, alias="liveGameDetails"
    )
    last_match_details: Optional[LastMatchDetailsResponse] = Field(
        None, alias="lastMatchDetails"
    )
    error_code: Optional[str] = Field(None, alias="errorCode")

    model_config = ConfigDict(populate_by_name=True)
