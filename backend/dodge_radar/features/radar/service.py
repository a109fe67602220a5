"""Lightweight radar check: is each player currently in a game?

Only the spectator endpoint is queried. A 404 means "not in game"; any other
failure, including a missing API key, reports ERROR for that player.
"""

from typing import List, Sequence, Tuple

import structlog

from dodge_radar.core.riot_api import Platform, RiotAPIClient, RiotAPIError
from dodge_radar.core.throttle import Throttle

from .schemas import RadarPlayer, RadarStatus

logger = structlog.get_logger(__name__)


class RadarService:
    """Checks live-game presence for a batch of already-resolved PUUIDs."""

    def __init__(self, client: RiotAPIClient, throttle: Throttle):
        self.client = client
        self.throttle = throttle

    async def check_players(
        self, players: Sequence[RadarPlayer]
    ) -> List[Tuple[str | None, RadarStatus]]:
        """Return ``(puuid, status)`` pairs in input order."""
        results: List[Tuple[str | None, RadarStatus]] = []
        for player in players:
            platform = Platform.parse(player.region)
            if platform is None or not player.puuid:
                logger.warning(
                    "Skipping radar player with invalid region or puuid",
                    puuid=player.puuid,
                    region=player.region,
                )
                results.append((player.puuid, RadarStatus.ERROR))
                continue

            await self.throttle.acquire()
            results.append((player.puuid, await self._check_one(player.puuid, platform)))
        return results

    async def _check_one(self, puuid: str, platform: Platform) -> RadarStatus:
        url = self.client.endpoints.active_game_by_puuid(puuid, platform)
        try:
            response = await self.client.authenticated_request(url)
        except RiotAPIError as e:
            logger.warning("Radar live game lookup failed", puuid=puuid, error=str(e))
            return RadarStatus.ERROR

        if response.ok:
            return RadarStatus.IN_GAME
        if response.status_code == 404:
            return RadarStatus.NOT_IN_GAME
        # 403, 429, 5xx and the synthetic missing-key 500
        return RadarStatus.ERROR
