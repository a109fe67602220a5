"""Last-game participants: who did this player just play with and against?"""

from typing import List

import structlog
from pydantic import ValidationError

from dodge_radar.core.exceptions import (
    ConfigurationServiceError,
    MatchHistoryError,
    PlayerLookupError,
)
from dodge_radar.core.riot_api import (
    ChampionAssetCache,
    ConfigurationError,
    Platform,
    RiotAPIClient,
    RiotAPIError,
    ServiceUnavailableError,
)
from dodge_radar.core.validation import validate_nested_fields

from .gateway import ParticipantGateway
from .schemas import ParticipantResponse

logger = structlog.get_logger(__name__)

SERVICE_NAME = "ParticipantsService"


def _is_network_failure(error: Exception) -> bool:
    return isinstance(error, ServiceUnavailableError) and error.status_code is None


class ParticipantsService:
    """Resolves every participant of a player's most recent match."""

    def __init__(
        self,
        client: RiotAPIClient,
        gateway: ParticipantGateway,
        assets: ChampionAssetCache,
    ):
        self.client = client
        self.gateway = gateway
        self.assets = assets

    async def get_last_game_participants(
        self, game_name: str, tag_line: str, platform: Platform, region: str
    ) -> List[ParticipantResponse]:
        """
        Look up the player's last match and describe all its participants.

        :param game_name: Riot ID name
        :param tag_line: Riot ID tag
        :param platform: Parsed platform of the player
        :param region: Region string as sent by the caller, echoed on every participant
        :raises ConfigurationServiceError: Riot API key not configured
        :raises PlayerLookupError: Player, match history or recent games not found
        :raises MatchHistoryError: The match record could not be retrieved
        """
        operation = "get_last_game_participants"
        context = {"game_name": game_name, "tag_line": tag_line, "region": region}

        await self.assets.ensure_loaded()

        try:
            account = await self.client.get_account_by_riot_id(game_name, tag_line, platform)
        except ConfigurationError as e:
            raise ConfigurationServiceError(
                "Server API Key Error", SERVICE_NAME, operation, context, e
            )
        except (RiotAPIError, ValidationError) as e:
            if _is_network_failure(e):
                raise
            raise PlayerLookupError("Player Not Found", SERVICE_NAME, operation, context, e)

        try:
            match_ids = await self.client.get_match_ids_by_puuid(
                account.puuid, platform, count=1
            )
        except RiotAPIError as e:
            if _is_network_failure(e):
                raise
            raise PlayerLookupError(
                "Match history not found", SERVICE_NAME, operation, context, e
            )
        if not match_ids:
            raise PlayerLookupError("No recent games found", SERVICE_NAME, operation, context)

        try:
            match = await self.client.get_match(match_ids[0], platform)
        except RiotAPIError as e:
            raise MatchHistoryError(
                "Failed to retrieve match data", SERVICE_NAME, operation, context, e
            )
        if not validate_nested_fields(match, {"info": ["participants"]}):
            raise MatchHistoryError("Failed to retrieve match data", SERVICE_NAME, operation, context)

        participant_puuids = [
            p["puuid"] for p in match["info"]["participants"] if p.get("puuid")
        ]
        logger.info(
            "Resolving last game participants",
            match_id=match_ids[0],
            participants=len(participant_puuids),
        )

        participants: List[ParticipantResponse] = []
        for puuid in participant_puuids:
            profile = await self.gateway.fetch_profile(puuid, platform)
            participants.append(
                ParticipantResponse(
                    game_name=profile.game_name,
                    tag_line=profile.tag_line,
                    region=region,
                    puuid=profile.puuid,
                    profile_icon_url=self.assets.profile_icon_url(profile.profile_icon_id),
                )
            )
        return participants
