"""Batch status checks.

Players are resolved strictly one after another, each admitted through the
configured throttle. A failure while resolving one player becomes an ERROR
status for that player only; the batch always returns one result per input,
in input order.
"""

from typing import List, Optional, Sequence, Tuple, Any

import structlog

from dodge_radar.core.throttle import Throttle

from .models import BatchEntry, PlayerStatus, ResolutionErrorCode
from .resolver import PlayerStatusResolver

logger = structlog.get_logger(__name__)


class StatusCheckService:
    """Runs the status resolver over a batch of players."""

    def __init__(self, resolver: PlayerStatusResolver, throttle: Throttle):
        self.resolver = resolver
        self.throttle = throttle

    async def check_players(
        self, entries: Sequence[BatchEntry], champ_to_track: Optional[str] = None
    ) -> List[Tuple[Any, PlayerStatus]]:
        """Resolve every entry and return ``(entry_id, status)`` pairs in input order."""
        logger.info(
            "Received status check",
            players=len(entries),
            champ_to_track=champ_to_track,
        )

        results: List[Tuple[Any, PlayerStatus]] = []
        for entry in entries:
            await self.throttle.acquire()
            results.append((entry.entry_id, await self._check_one(entry, champ_to_track)))

        logger.info("Status check complete", statuses=len(results))
        return results

    async def _check_one(
        self, entry: BatchEntry, champ_to_track: Optional[str]
    ) -> PlayerStatus:
        logger.info(
            "Checking player",
            player=entry.identity.riot_id,
            region=entry.identity.region,
        )
        try:
            return await self.resolver.resolve(entry.identity, champ_to_track)
        except Exception as e:
            logger.error(
                "Unexpected error while resolving player",
                player=entry.identity.riot_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return PlayerStatus.error(ResolutionErrorCode.INTERNAL_ERROR)
