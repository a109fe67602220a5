"""
Riot API gateway for participant profiles.

Each participant needs two lookups (summoner for the icon, account for the
Riot ID). Either may fail without failing the request; the missing half falls
back to placeholder values.
"""

import structlog
from pydantic import ValidationError

from dodge_radar.core.riot_api import Platform, RiotAPIClient, RiotAPIError

from .models import ParticipantProfile

logger = structlog.get_logger(__name__)


class ParticipantGateway:
    """Translates summoner + account payloads into ``ParticipantProfile``."""

    def __init__(self, riot_api_client: RiotAPIClient):
        self._client = riot_api_client

    async def fetch_profile(self, puuid: str, platform: Platform) -> ParticipantProfile:
        profile = ParticipantProfile.unresolved(puuid)

        try:
            summoner = await self._client.get_summoner_by_puuid(puuid, platform)
            profile.profile_icon_id = summoner.profile_icon_id
        except (RiotAPIError, ValidationError) as e:
            logger.warning("Participant summoner lookup failed", puuid=puuid, error=str(e))

        try:
            account = await self._client.get_account_by_puuid(puuid, platform)
            profile.game_name = account.game_name or profile.game_name
            profile.tag_line = account.tag_line or profile.tag_line
        except (RiotAPIError, ValidationError) as e:
            logger.warning("Participant account lookup failed", puuid=puuid, error=str(e))

        return profile
