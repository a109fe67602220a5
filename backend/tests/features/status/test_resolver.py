"""Tests for the player status resolver."""

from unittest.mock import AsyncMock

import httpx
import pytest

from dodge_radar.core.riot_api import (
    AccountDTO,
    ConfigurationError,
    CurrentGameInfoDTO,
    ForbiddenError,
    NotFoundError,
    Platform,
    RateLimitError,
    RiotAPIClient,
    RiotAPIError,
    ServiceUnavailableError,
    SummonerDTO,
)
from dodge_radar.features.status import (
    PlayerIdentity,
    PlayerStatusResolver,
    ResolutionErrorCode,
    ResolutionState,
    StatusKind,
)
from dodge_radar.features.status.resolver import ResolutionContext

NOW_MS = 1_710_000_000_000
TRACKED_PUUID = "puuid-tracked"
ICON_URL = "https://ddragon.leagueoflegends.com/cdn/14.20.1/img/profileicon/29.png"


@pytest.fixture
def identity():
    return PlayerIdentity(game_name="Faker", tag_line="KR1", region="KR")


@pytest.fixture
def mock_client(sample_account_data, sample_summoner_data, make_match):
    """Riot client for a player who is not in game and finished a game 10 minutes ago."""
    client = AsyncMock(spec=RiotAPIClient)
    client.get_account_by_riot_id.return_value = AccountDTO(**sample_account_data)
    client.get_summoner_by_puuid.return_value = SummonerDTO(**sample_summoner_data)
    client.get_active_game.side_effect = NotFoundError("Resource not found", status_code=404)
    client.get_match_ids_by_puuid.return_value = ["KR_1234"]
    client.get_match.return_value = make_match(end_ms=NOW_MS - 10 * 60_000)
    return client


@pytest.fixture
def resolver(mock_client, assets):
    return PlayerStatusResolver(mock_client, assets, clock=lambda: NOW_MS)


class TestLiveGame:
    @pytest.mark.asyncio
    async def test_in_game(self, resolver, mock_client, identity, sample_live_game_data):
        mock_client.get_active_game.side_effect = None
        mock_client.get_active_game.return_value = CurrentGameInfoDTO(**sample_live_game_data)

        status = await resolver.resolve(identity, "Ahri")

        assert status.status is StatusKind.IN_GAME
        assert status.message == "IN GAME (2:05)"
        assert status.is_champ_banned is True
        assert status.profile_icon_url == ICON_URL
        assert status.live_match.team1_bans == ["Ahri"]
        assert status.last_match is None
        mock_client.get_match_ids_by_puuid.assert_not_called()

    @pytest.mark.asyncio
    async def test_in_game_watched_champion_not_banned(
        self, resolver, mock_client, identity, sample_live_game_data
    ):
        mock_client.get_active_game.side_effect = None
        mock_client.get_active_game.return_value = CurrentGameInfoDTO(**sample_live_game_data)

        status = await resolver.resolve(identity, "Zed")

        assert status.is_champ_banned is False

    @pytest.mark.asyncio
    async def test_live_lookup_uses_player_platform(self, resolver, mock_client):
        await resolver.resolve(PlayerIdentity("Caps", "EUW", "euw1"))

        _, platform = mock_client.get_active_game.call_args.args
        assert platform.value == "EUW1"


class TestRecentGames:
    @pytest.mark.asyncio
    async def test_last_game_within_threshold_is_high_risk(self, resolver, identity):
        status = await resolver.resolve(identity)

        assert status.status is StatusKind.HIGH_RISK
        assert status.message == "HIGH RISK (10m ago)"
        assert status.last_match.kda == "7/2/11"
        assert status.is_champ_banned is None

    @pytest.mark.asyncio
    async def test_exactly_fifteen_minutes_is_high_risk(
        self, resolver, mock_client, identity, make_match
    ):
        mock_client.get_match.return_value = make_match(end_ms=NOW_MS - 15 * 60_000)

        status = await resolver.resolve(identity)

        assert status.status is StatusKind.HIGH_RISK
        assert status.message == "HIGH RISK (15m ago)"

    @pytest.mark.asyncio
    async def test_sixteen_minutes_is_low_risk(
        self, resolver, mock_client, identity, make_match
    ):
        mock_client.get_match.return_value = make_match(end_ms=NOW_MS - 16 * 60_000)

        status = await resolver.resolve(identity)

        assert status.status is StatusKind.LOW_RISK
        assert status.message == "LOW RISK (16m ago)"

    @pytest.mark.asyncio
    async def test_old_game_message_in_days(self, resolver, mock_client, identity, make_match):
        mock_client.get_match.return_value = make_match(end_ms=NOW_MS - 3 * 24 * 60 * 60_000)

        status = await resolver.resolve(identity)

        assert status.message == "LOW RISK (3d ago)"

    @pytest.mark.asyncio
    async def test_threshold_is_configurable(self, mock_client, assets, identity, make_match):
        mock_client.get_match.return_value = make_match(end_ms=NOW_MS - 20 * 60_000)
        resolver = PlayerStatusResolver(
            mock_client, assets, high_risk_threshold_minutes=30, clock=lambda: NOW_MS
        )

        status = await resolver.resolve(identity)

        assert status.status is StatusKind.HIGH_RISK

    @pytest.mark.asyncio
    async def test_hidden_live_game_reads_be_careful(self, resolver, mock_client, identity):
        mock_client.get_active_game.side_effect = ForbiddenError(
            "Access forbidden", status_code=403
        )

        status = await resolver.resolve(identity, "Ahri")

        assert status.status is StatusKind.HIGH_RISK
        assert status.message == "BE CAREFUL (10m ago)"
        assert status.is_champ_banned is None

    @pytest.mark.asyncio
    async def test_hidden_live_game_with_old_match_is_low_risk(
        self, resolver, mock_client, identity, make_match
    ):
        mock_client.get_active_game.side_effect = ForbiddenError(
            "Access forbidden", status_code=403
        )
        mock_client.get_match.return_value = make_match(end_ms=NOW_MS - 2 * 60 * 60_000)

        status = await resolver.resolve(identity, "Ahri")

        assert status.message == "LOW RISK (2h ago)"
        assert status.is_champ_banned is True

    @pytest.mark.asyncio
    async def test_live_lookup_failure_falls_back_to_history(
        self, resolver, mock_client, identity
    ):
        mock_client.get_active_game.side_effect = RateLimitError(
            "Rate limit exceeded", status_code=429
        )

        status = await resolver.resolve(identity)

        assert status.status is StatusKind.HIGH_RISK
        assert status.message == "HIGH RISK (10m ago)"

    @pytest.mark.asyncio
    async def test_ban_check_is_case_insensitive(
        self, resolver, mock_client, identity, make_match
    ):
        mock_client.get_match.return_value = make_match(team1_bans=(103,), team2_bans=())

        status = await resolver.resolve(identity, "aHRi")

        assert status.is_champ_banned is True

    @pytest.mark.asyncio
    async def test_watched_display_name_matches_ban_image_id(
        self, resolver, mock_client, identity, make_match
    ):
        mock_client.get_match.return_value = make_match(team1_bans=(62,), team2_bans=())

        status = await resolver.resolve(identity, "Wukong")

        assert status.is_champ_banned is True

    @pytest.mark.asyncio
    async def test_no_recent_games(self, resolver, mock_client, identity):
        mock_client.get_match_ids_by_puuid.return_value = []

        status = await resolver.resolve(identity, "Ahri")

        assert status.status is StatusKind.LOW_RISK
        assert status.message == "No recent games"
        assert status.is_champ_banned is None
        assert status.profile_icon_url == ICON_URL
        mock_client.get_match.assert_not_called()


class TestFailures:
    @pytest.mark.asyncio
    async def test_invalid_region_makes_no_calls(self, resolver, mock_client):
        status = await resolver.resolve(PlayerIdentity("Faker", "KR1", "MOON1"))

        assert status.status is StatusKind.ERROR
        assert status.error_code is ResolutionErrorCode.INVALID_REGION
        mock_client.get_account_by_riot_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_account_not_found(self, resolver, mock_client, identity):
        mock_client.get_account_by_riot_id.side_effect = NotFoundError(
            "Resource not found", status_code=404
        )

        status = await resolver.resolve(identity)

        assert status.status is StatusKind.ERROR
        assert status.message == "Player Not Found"
        assert status.profile_icon_url is None
        mock_client.get_summoner_by_puuid.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_key_is_server_config_error(self, resolver, mock_client, identity):
        mock_client.get_account_by_riot_id.side_effect = ConfigurationError(
            "Riot API key not configured", status_code=500
        )

        status = await resolver.resolve(identity)

        assert status.message == "Server API Key Error"
        assert status.error_code is ResolutionErrorCode.SERVER_CONFIG_ERROR

    @pytest.mark.asyncio
    async def test_summoner_not_found(self, resolver, mock_client, identity):
        mock_client.get_summoner_by_puuid.side_effect = NotFoundError(
            "Resource not found", status_code=404
        )

        status = await resolver.resolve(identity)

        assert status.message == "Summoner Not Found"
        mock_client.get_active_game.assert_not_called()

    @pytest.mark.asyncio
    async def test_match_list_failure(self, resolver, mock_client, identity):
        mock_client.get_match_ids_by_puuid.side_effect = RiotAPIError(
            "Unexpected status 500", status_code=500
        )

        status = await resolver.resolve(identity)

        assert status.message == "Match History Error"
        assert status.profile_icon_url == ICON_URL

    @pytest.mark.asyncio
    async def test_match_record_failure(self, resolver, mock_client, identity):
        mock_client.get_match.side_effect = NotFoundError("Resource not found", status_code=404)

        status = await resolver.resolve(identity)

        assert status.error_code is ResolutionErrorCode.MATCH_HISTORY_ERROR

    @pytest.mark.asyncio
    async def test_match_without_info(self, resolver, mock_client, identity):
        mock_client.get_match.return_value = {"metadata": {}}

        status = await resolver.resolve(identity)

        assert status.error_code is ResolutionErrorCode.MATCH_HISTORY_ERROR

    @pytest.mark.asyncio
    async def test_network_failure_is_upstream_unavailable(
        self, resolver, mock_client, identity
    ):
        mock_client.get_account_by_riot_id.side_effect = ServiceUnavailableError(
            "Request failed: timeout"
        )

        status = await resolver.resolve(identity)

        assert status.error_code is ResolutionErrorCode.UPSTREAM_UNAVAILABLE
        assert status.message == "Riot API Unavailable"


class TestWithoutCredential:
    @pytest.mark.asyncio
    async def test_no_key_means_no_network_calls(self, assets, identity):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        client = RiotAPIClient(api_key=None, transport=httpx.MockTransport(handler))
        resolver = PlayerStatusResolver(client, assets, clock=lambda: NOW_MS)

        status = await resolver.resolve(identity, "Ahri")

        assert status.status is StatusKind.ERROR
        assert status.message == "Server API Key Error"
        assert requests == []


class TestResolutionContext:
    def test_puuid_before_account_is_resolved_raises(self, identity):
        ctx = ResolutionContext(identity=identity, platform=Platform.KR)

        with pytest.raises(RuntimeError):
            ctx.puuid

    @pytest.mark.asyncio
    async def test_done_without_result_raises(self, resolver, identity):
        resolver._handlers[ResolutionState.RESOLVING_ACCOUNT] = AsyncMock(
            return_value=ResolutionState.DONE
        )

        with pytest.raises(RuntimeError):
            await resolver.resolve(identity)
