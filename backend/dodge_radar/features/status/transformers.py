"""Transformers for the status feature.

- Raw Riot payloads -> domain models (``project_match``, ``project_live_game``)
- Domain models -> API schemas (``status_to_response``)

Projection functions are pure apart from asset lookups, which never fail.
"""

from typing import Any, Dict, List, Optional

from dodge_radar.core.riot_api import (
    ChampionAssetCache,
    CurrentGameInfoDTO,
    TeamId,
    UNKNOWN_ASSET,
)
from dodge_radar.core.validation import validate_nested_fields

from .formatting import elapsed_seconds_since
from .models import CompletedMatchSummary, LiveMatchInfo, PlayerStatus, RosterEntry
from .schemas import (
    LastMatchDetailsResponse,
    LiveGameDetailsResponse,
    PlayerStatusResponse,
    RosterEntryResponse,
)


def _team_ban_ids(teams: List[Dict[str, Any]], index: int) -> List[Any]:
    if index >= len(teams):
        return []
    return [ban.get("championId") for ban in teams[index].get("bans") or []]


def project_match(
    raw_match: Dict[str, Any], puuid: str, assets: ChampionAssetCache
) -> Optional[CompletedMatchSummary]:
    """
    Project a match-v5 record onto the tracked player.

    Args:
        raw_match: Match record as returned by the match endpoint
        puuid: Tracked player's PUUID
        assets: Champion lookups for bans and champion keys

    Returns:
        The summary, or None when the record has no ``info`` section
    """
    if not raw_match or not validate_nested_fields(raw_match, {"info": []}):
        return None

    info = raw_match["info"]
    teams = info.get("teams") or []

    team1: List[RosterEntry] = []
    team2: List[RosterEntry] = []
    tracked: Optional[Dict[str, Any]] = None

    for participant in info.get("participants") or []:
        entry = RosterEntry(
            game_name=participant.get("riotIdGameName") or "",
            tag_line=f"#{participant.get('riotIdTagline') or ''}",
            champion_played=assets.resolve_canonical_id(
                participant.get("championName") or UNKNOWN_ASSET
            ),
        )
        if participant.get("teamId") == TeamId.TEAM_ONE:
            team1.append(entry)
        else:
            team2.append(entry)

        if participant.get("puuid") == puuid:
            tracked = participant

    if tracked is not None:
        win = bool(tracked.get("win", False))
        champion_played = assets.resolve_canonical_id(
            tracked.get("championName") or UNKNOWN_ASSET
        )
        kda = f"{tracked.get('kills', 0)}/{tracked.get('deaths', 0)}/{tracked.get('assists', 0)}"
    else:
        win, champion_played, kda = False, UNKNOWN_ASSET, "N/A"

    return CompletedMatchSummary(
        win=win,
        champion_played=champion_played,
        kda=kda,
        team1_bans=[assets.resolve_display_name(i) for i in _team_ban_ids(teams, 0)],
        team2_bans=[assets.resolve_display_name(i) for i in _team_ban_ids(teams, 1)],
        team1=team1,
        team2=team2,
        game_end_timestamp=info.get("gameEndTimestamp"),
    )


def project_live_game(
    game: CurrentGameInfoDTO, assets: ChampionAssetCache, now_ms: int
) -> LiveMatchInfo:
    """Split a spectator payload into per-team bans and rosters."""

    def bans_for(team: TeamId) -> List[str]:
        return [
            assets.resolve_display_name(ban.champion_id)
            for ban in game.banned_champions
            if ban.team_id == team
        ]

    def roster_for(team: TeamId) -> List[RosterEntry]:
        return [
            RosterEntry(
                game_name=participant.display_name,
                tag_line="",
                champion_played=assets.resolve_display_name(participant.champion_id),
            )
            for participant in game.participants
            if participant.team_id == team
        ]

    return LiveMatchInfo(
        game_start_time=game.game_start_time,
        elapsed_seconds=elapsed_seconds_since(game.game_start_time, now_ms),
        team1_bans=bans_for(TeamId.TEAM_ONE),
        team2_bans=bans_for(TeamId.TEAM_TWO),
        team1=roster_for(TeamId.TEAM_ONE),
        team2=roster_for(TeamId.TEAM_TWO),
    )


def _roster_to_response(roster: List[RosterEntry]) -> List[RosterEntryResponse]:
    return [
        RosterEntryResponse(
            game_name=entry.game_name,
            tag_line=entry.tag_line,
            champion_played=entry.champion_played,
        )
        for entry in roster
    ]


def status_to_response(entry_id: Any, status: PlayerStatus) -> PlayerStatusResponse:
    """Transform a resolved status into the API schema, tagged with ``entry_id``."""
    live = status.live_match
    last = status.last_match

    return PlayerStatusResponse(
        id=entry_id,
        status=status.status,
        status_message=status.message,
        is_champ_banned=status.is_champ_banned,
        profile_icon_url=status.profile_icon_url,
        live_game_details=(
            LiveGameDetailsResponse(
                game_start_time=live.game_start_time,
                elapsed_seconds=live.elapsed_seconds,
                team1_bans=live.team1_bans,
                team2_bans=live.team2_bans,
                team1=_roster_to_response(live.team1),
                team2=_roster_to_response(live.team2),
            )
            if live
            else None
        ),
        last_match_details=(
            LastMatchDetailsResponse(
                win=last.win,
                champion_played=last.champion_played,
                kda=last.kda,
                team1_bans=last.team1_bans,
                team2_bans=last.team2_bans,
                team1=_roster_to_response(last.team1),
                team2=_roster_to_response(last.team2),
            )
            if last
            else None
        ),
        error_code=status.error_code.value if status.error_code else None,
    )
