"""Tests for status transformers (match and live game projection)."""

import pytest

from dodge_radar.core.riot_api import CurrentGameInfoDTO
from dodge_radar.features.status.models import (
    PlayerStatus,
    ResolutionErrorCode,
    StatusKind,
)
from dodge_radar.features.status.transformers import (
    project_live_game,
    project_match,
    status_to_response,
)

TRACKED_PUUID = "puuid-tracked"


class TestProjectMatch:
    def test_tracked_player_summary(self, make_match, assets):
        summary = project_match(make_match(), TRACKED_PUUID, assets)

        assert summary is not None
        assert summary.win is True
        assert summary.champion_played == "MonkeyKing"
        assert summary.kda == "7/2/11"

    def test_bans_are_resolved_per_team(self, make_match, assets):
        summary = project_match(
            make_match(team1_bans=(103, 238), team2_bans=(157, 999)), TRACKED_PUUID, assets
        )

        assert summary.team1_bans == ["Ahri", "Zed"]
        assert summary.team2_bans == ["Yasuo", "Unknown"]
        assert summary.all_bans == ["Ahri", "Zed", "Yasuo", "Unknown"]

    def test_rosters_split_by_team(self, make_match, assets):
        summary = project_match(make_match(), TRACKED_PUUID, assets)

        assert [(p.game_name, p.tag_line, p.champion_played) for p in summary.team1] == [
            ("Faker", "#KR1", "MonkeyKing")
        ]
        assert [(p.game_name, p.tag_line, p.champion_played) for p in summary.team2] == [
            ("Chovy", "#KR2", "Zed")
        ]

    def test_player_absent_from_match(self, make_match, assets):
        summary = project_match(make_match(), "someone-else", assets)

        assert summary.win is False
        assert summary.champion_played == "Unknown"
        assert summary.kda == "N/A"

    def test_end_timestamp_is_carried(self, make_match, assets, now_ms):
        summary = project_match(make_match(end_ms=now_ms - 1000), TRACKED_PUUID, assets)

        assert summary.game_end_timestamp == now_ms - 1000

    @pytest.mark.parametrize("raw", [{}, {"metadata": {}}, {"info": None}])
    def test_missing_info_yields_none(self, raw, assets):
        assert project_match(raw, TRACKED_PUUID, assets) is None

    def test_missing_teams_yields_empty_bans(self, make_match, assets):
        raw = make_match()
        del raw["info"]["teams"]

        summary = project_match(raw, TRACKED_PUUID, assets)

        assert summary.team1_bans == []
        assert summary.team2_bans == []


class TestProjectLiveGame:
    def test_bans_and_rosters(self, sample_live_game_data, assets, now_ms):
        game = CurrentGameInfoDTO(**sample_live_game_data)

        live = project_live_game(game, assets, now_ms)

        assert live.elapsed_seconds == 125
        assert live.team1_bans == ["Ahri"]
        assert live.team2_bans == ["Yasuo", "Unknown"]
        assert [p.game_name for p in live.team1] == ["Faker"]
        assert [p.champion_played for p in live.team2] == ["Zed"]

    def test_missing_start_time_is_zero_elapsed(self, assets, now_ms):
        game = CurrentGameInfoDTO(gameStartTime=0, participants=[], bannedChampions=[])

        assert project_live_game(game, assets, now_ms).elapsed_seconds == 0


class TestStatusToResponse:
    def test_error_status(self):
        response = status_to_response(
            7, PlayerStatus.error(ResolutionErrorCode.PLAYER_NOT_FOUND)
        )
        body = response.model_dump(by_alias=True)

        assert body["id"] == 7
        assert body["status"] == StatusKind.ERROR
        assert body["statusMessage"] == "Player Not Found"
        assert body["errorCode"] == "PLAYER_NOT_FOUND"
        assert body["liveGameDetails"] is None

    def test_completed_match_details(self, make_match, assets):
        summary = project_match(make_match(), TRACKED_PUUID, assets)
        status = PlayerStatus(
            status=StatusKind.HIGH_RISK,
            message="HIGH RISK (10m ago)",
            is_champ_banned=True,
            last_match=summary,
        )

        body = status_to_response("row-1", status).model_dump(by_alias=True)

        assert body["lastMatchDetails"]["championPlayed"] == "MonkeyKing"
        assert body["lastMatchDetails"]["team1"][0]["tagLine"] == "#KR1"
        assert body["isChampBanned"] is True
        assert body["errorCode"] is None
