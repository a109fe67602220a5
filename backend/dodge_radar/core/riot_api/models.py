"""Pydantic models for Riot API response data.

Only the fields this service reads are declared; anything else Riot sends is
ignored. Match records are kept as raw dictionaries and projected by
``features.status.transformers``.
"""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: str
    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SummonerDTO(BaseModel):
    """League of Legends Summoner information."""

    id: Optional[str] = None
    puuid: str
    profile_icon_id: int = Field(0, alias="profileIconId")
    summoner_level: Optional[int] = Field(None, alias="summonerLevel")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BannedChampionDTO(BaseModel):
    """One ban in a live game."""

    champion_id: int = Field(..., alias="championId")
    team_id: int = Field(..., alias="teamId")
    pick_turn: Optional[int] = Field(None, alias="pickTurn")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CurrentGameParticipantDTO(BaseModel):
    """One participant of a live game."""

    puuid: Optional[str] = None
    team_id: int = Field(..., alias="teamId")
    champion_id: int = Field(..., alias="championId")
    riot_id: Optional[str] = Field(None, alias="riotId")
    summoner_name: Optional[str] = Field(None, alias="summonerName")
    summoner_id: Optional[str] = Field(None, alias="summonerId")

    @property
    def display_name(self) -> str:
        """Best available name; newer payloads only carry ``riotId``."""
        if self.riot_id:
            return self.riot_id.split("#", 1)[0]
        return self.summoner_name or self.summoner_id or self.puuid or ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CurrentGameInfoDTO(BaseModel):
    """Spectator v5 live game."""

    game_id: Optional[int] = Field(None, alias="gameId")
    game_start_time: int = Field(0, alias="gameStartTime")
    game_length: Optional[int] = Field(None, alias="gameLength")
    banned_champions: List[BannedChampionDTO] = Field(
        default_factory=list, alias="bannedChampions"
    )
    participants: List[CurrentGameParticipantDTO] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
