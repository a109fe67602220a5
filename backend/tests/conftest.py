"""Shared fixtures for the Dodge Radar test suite."""

from typing import Any, Callable, Dict, Iterable, Optional

import pytest

from dodge_radar.core.riot_api import ChampionAssetCache

NOW_MS = 1_710_000_000_000
TRACKED_PUUID = "puuid-tracked"


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def assets() -> ChampionAssetCache:
    """A pre-populated asset cache; ``ensure_loaded`` is a no-op on it."""
    cache = ChampionAssetCache(fallback_version="14.1.1")
    cache.asset_version = "14.20.1"
    cache.id_to_name = {
        "103": "Ahri",
        "62": "MonkeyKing",
        "238": "Zed",
        "157": "Yasuo",
        "64": "LeeSin",
    }
    cache.name_to_id = {
        "Ahri": "Ahri",
        "Wukong": "MonkeyKing",
        "Zed": "Zed",
        "Yasuo": "Yasuo",
        "Lee Sin": "LeeSin",
    }
    return cache


@pytest.fixture
def sample_account_data() -> Dict[str, Any]:
    return {"puuid": TRACKED_PUUID, "gameName": "Faker", "tagLine": "KR1"}


@pytest.fixture
def sample_summoner_data() -> Dict[str, Any]:
    return {
        "id": "summoner-tracked",
        "puuid": TRACKED_PUUID,
        "profileIconId": 29,
        "summonerLevel": 512,
    }


@pytest.fixture
def sample_live_game_data() -> Dict[str, Any]:
    """Spectator payload for a game that started 2 minutes 5 seconds ago."""
    return {
        "gameId": 4242,
        "gameStartTime": NOW_MS - 125_000,
        "gameLength": 120,
        "bannedChampions": [
            {"championId": 103, "teamId": 100, "pickTurn": 1},
            {"championId": 157, "teamId": 200, "pickTurn": 2},
            {"championId": 999, "teamId": 200, "pickTurn": 3},
        ],
        "participants": [
            {"puuid": TRACKED_PUUID, "teamId": 100, "championId": 62, "riotId": "Faker#KR1"},
            {"puuid": "puuid-enemy", "teamId": 200, "championId": 238, "riotId": "Chovy#KR2"},
        ],
    }


@pytest.fixture
def make_match() -> Callable[..., Dict[str, Any]]:
    """Factory for match-v5 records with two participants."""

    def _make_match(
        end_ms: Optional[int] = NOW_MS - 10 * 60_000,
        team1_bans: Iterable[int] = (103, 238),
        team2_bans: Iterable[int] = (157,),
        tracked_puuid: str = TRACKED_PUUID,
    ) -> Dict[str, Any]:
        info: Dict[str, Any] = {
            "gameCreation": NOW_MS - 40 * 60_000,
            "gameDuration": 1800,
            "queueId": 420,
            "teams": [
                {
                    "teamId": 100,
                    "win": True,
                    "bans": [{"championId": c, "pickTurn": i} for i, c in enumerate(team1_bans)],
                },
                {
                    "teamId": 200,
                    "win": False,
                    "bans": [{"championId": c, "pickTurn": i} for i, c in enumerate(team2_bans)],
                },
            ],
            "participants": [
                {
                    "puuid": tracked_puuid,
                    "riotIdGameName": "Faker",
                    "riotIdTagline": "KR1",
                    "teamId": 100,
                    "championName": "Wukong",
                    "kills": 7,
                    "deaths": 2,
                    "assists": 11,
                    "win": True,
                },
                {
                    "puuid": "puuid-enemy",
                    "riotIdGameName": "Chovy",
                    "riotIdTagline": "KR2",
                    "teamId": 200,
                    "championName": "Zed",
                    "kills": 3,
                    "deaths": 6,
                    "assists": 4,
                    "win": False,
                },
            ],
        }
        if end_ms is not None:
            info["gameEndTimestamp"] = end_ms
        return {
            "metadata": {"matchId": "KR_1234", "participants": [tracked_puuid, "puuid-enemy"]},
            "info": info,
        }

    return _make_match
