"""
Player status resolution.

Resolving one player is a small state machine::

    RESOLVING_ACCOUNT -> RESOLVING_PROFILE -> CHECKING_LIVE -> FETCHING_HISTORY -> DONE
            |                   |                  |                  |
            +-------------------+------------------+------------------+--> FAILED

Each state handler performs one step, records what it learned on the
``ResolutionContext`` and returns the next state. Upstream failures arrive as
typed ``RiotAPIError`` subclasses and are mapped to a ``ResolutionErrorCode``;
the resolver itself never raises for upstream failures.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional

import structlog
from pydantic import ValidationError

from dodge_radar.core.riot_api import (
    AccountDTO,
    ChampionAssetCache,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    Platform,
    RiotAPIClient,
    RiotAPIError,
    ServiceUnavailableError,
    SummonerDTO,
)

from .formatting import (
    epoch_millis,
    format_elapsed,
    format_time_ago,
    is_champion_banned,
    minutes_since,
)
from .models import (
    LiveLookupOutcome,
    PlayerIdentity,
    PlayerStatus,
    ResolutionErrorCode,
    ResolutionState,
    StatusKind,
)
from .transformers import project_live_game, project_match

logger = structlog.get_logger(__name__)

HIGH_RISK_THRESHOLD_MINUTES = 15


@dataclass
class ResolutionContext:
    """Everything learned about one player during a resolver run."""

    identity: PlayerIdentity
    platform: Platform
    watched_champion: str = ""
    champion_key: str = ""
    account: Optional[AccountDTO] = None
    summoner: Optional[SummonerDTO] = None
    profile_icon_url: Optional[str] = None
    live_outcome: Optional[LiveLookupOutcome] = None
    result: Optional[PlayerStatus] = None
    error: Optional[ResolutionErrorCode] = None

    @property
    def puuid(self) -> str:
        if self.account is None:
            raise RuntimeError("Account has not been resolved yet")
        return self.account.puuid

    def fail(self, code: ResolutionErrorCode) -> ResolutionState:
        self.error = code
        return ResolutionState.FAILED

    def finish(self, result: PlayerStatus) -> ResolutionState:
        self.result = result
        return ResolutionState.DONE


def failure_code(
    error: Exception, default: ResolutionErrorCode
) -> ResolutionErrorCode:
    """Map an upstream error to the code reported for the failing step."""
    if isinstance(error, ConfigurationError):
        return ResolutionErrorCode.SERVER_CONFIG_ERROR
    if isinstance(error, ServiceUnavailableError) and error.status_code is None:
        # Raised by the client for network-level failures only
        return ResolutionErrorCode.UPSTREAM_UNAVAILABLE
    return default


StateHandler = Callable[[ResolutionContext], Awaitable[ResolutionState]]


class PlayerStatusResolver:
    """Resolves the live/recent-game status of a single player."""

    def __init__(
        self,
        client: RiotAPIClient,
        assets: ChampionAssetCache,
        high_risk_threshold_minutes: int = HIGH_RISK_THRESHOLD_MINUTES,
        clock: Callable[[], int] = epoch_millis,
    ):
        """
        :param client: Riot API client
        :param assets: Champion asset cache (loaded lazily on first use)
        :param high_risk_threshold_minutes: Last game ending this recently means HIGH_RISK (inclusive)
        :param clock: Returns "now" in epoch milliseconds
        """
        self.client = client
        self.assets = assets
        self.high_risk_threshold_minutes = high_risk_threshold_minutes
        self.clock = clock
        self._handlers: Dict[ResolutionState, StateHandler] = {
            ResolutionState.RESOLVING_ACCOUNT: self._resolve_account,
            ResolutionState.RESOLVING_PROFILE: self._resolve_profile,
            ResolutionState.CHECKING_LIVE: self._check_live_game,
            ResolutionState.FETCHING_HISTORY: self._fetch_history,
        }

    async def resolve(
        self, identity: PlayerIdentity, watched_champion: Optional[str] = None
    ) -> PlayerStatus:
        """Run the state machine for one player and return its status."""
        log = logger.bind(player=identity.riot_id, region=identity.region)

        platform = identity.platform
        if platform is None:
            log.warning("Unsupported region")
            return PlayerStatus.error(ResolutionErrorCode.INVALID_REGION)

        ctx = ResolutionContext(
            identity=identity,
            platform=platform,
            watched_champion=watched_champion or "",
        )

        state = ResolutionState.RESOLVING_ACCOUNT
        while not state.is_terminal:
            next_state = await self._handlers[state](ctx)
            log.debug(
                "Status resolution transition",
                from_state=state.value,
                to_state=next_state.value,
            )
            state = next_state

        if state is ResolutionState.FAILED:
            code = ctx.error or ResolutionErrorCode.INTERNAL_ERROR
            log.info("Status resolution failed", error_code=code.value)
            return PlayerStatus.error(code, profile_icon_url=ctx.profile_icon_url)

        if ctx.result is None:
            raise RuntimeError("Resolution finished without a result")
        log.info("Status resolved", status=ctx.result.status.value)
        return ctx.result

    async def _resolve_account(self, ctx: ResolutionContext) -> ResolutionState:
        try:
            ctx.account = await self.client.get_account_by_riot_id(
                ctx.identity.game_name, ctx.identity.tag_line, ctx.platform
            )
        except (RiotAPIError, ValidationError) as e:
            return ctx.fail(failure_code(e, ResolutionErrorCode.PLAYER_NOT_FOUND))
        return ResolutionState.RESOLVING_PROFILE

    async def _resolve_profile(self, ctx: ResolutionContext) -> ResolutionState:
        # Assets are only needed once the account exists
        await self.assets.ensure_loaded()
        if ctx.watched_champion:
            ctx.champion_key = self.assets.resolve_canonical_id(ctx.watched_champion)

        try:
            ctx.summoner = await self.client.get_summoner_by_puuid(
                ctx.puuid, ctx.platform
            )
        except (RiotAPIError, ValidationError) as e:
            return ctx.fail(failure_code(e, ResolutionErrorCode.SUMMONER_NOT_FOUND))
        ctx.profile_icon_url = self.assets.profile_icon_url(
            ctx.summoner.profile_icon_id
        )
        return ResolutionState.CHECKING_LIVE

    async def _check_live_game(self, ctx: ResolutionContext) -> ResolutionState:
        try:
            game = await self.client.get_active_game(ctx.puuid, ctx.platform)
        except NotFoundError:
            ctx.live_outcome = LiveLookupOutcome.NOT_FOUND
            return ResolutionState.FETCHING_HISTORY
        except ForbiddenError:
            ctx.live_outcome = LiveLookupOutcome.FORBIDDEN
            return ResolutionState.FETCHING_HISTORY
        except (RiotAPIError, ValidationError) as e:
            logger.warning(
                "Live game lookup failed, falling back to match history",
                player=ctx.identity.riot_id,
                error=str(e),
            )
            ctx.live_outcome = LiveLookupOutcome.UNAVAILABLE
            return ResolutionState.FETCHING_HISTORY

        ctx.live_outcome = LiveLookupOutcome.IN_GAME
        live = project_live_game(game, self.assets, self.clock())
        return ctx.finish(
            PlayerStatus(
                status=StatusKind.IN_GAME,
                message=f"IN GAME ({format_elapsed(live.elapsed_seconds)})",
                is_champ_banned=is_champion_banned(live.all_bans, ctx.champion_key),
                profile_icon_url=ctx.profile_icon_url,
                live_match=live,
            )
        )

    async def _fetch_history(self, ctx: ResolutionContext) -> ResolutionState:
        try:
            match_ids = await self.client.get_match_ids_by_puuid(
                ctx.puuid, ctx.platform, count=1
            )
        except (RiotAPIError, ValidationError) as e:
            return ctx.fail(failure_code(e, ResolutionErrorCode.MATCH_HISTORY_ERROR))

        if not match_ids:
            return ctx.finish(
                PlayerStatus(
                    status=StatusKind.LOW_RISK,
                    message="No recent games",
                    profile_icon_url=ctx.profile_icon_url,
                )
            )

        try:
            raw_match = await self.client.get_match(match_ids[0], ctx.platform)
        except (RiotAPIError, ValidationError) as e:
            return ctx.fail(failure_code(e, ResolutionErrorCode.MATCH_HISTORY_ERROR))

        summary = project_match(raw_match, ctx.puuid, self.assets)
        if summary is None:
            return ctx.fail(ResolutionErrorCode.MATCH_HISTORY_ERROR)

        minutes_ago = minutes_since(summary.game_end_timestamp, self.clock())
        time_ago = format_time_ago(minutes_ago)
        banned = is_champion_banned(summary.all_bans, ctx.champion_key)

        if minutes_ago <= self.high_risk_threshold_minutes:
            kind = StatusKind.HIGH_RISK
            if ctx.live_outcome is LiveLookupOutcome.FORBIDDEN:
                # Live game is hidden; its bans are unknown
                label = "BE CAREFUL"
                banned = None
            else:
                label = "HIGH RISK"
        else:
            label = "LOW RISK"
            kind = StatusKind.LOW_RISK

        return ctx.finish(
            PlayerStatus(
                status=kind,
                message=f"{label} ({time_ago})",
                is_champ_banned=banned,
                profile_icon_url=ctx.profile_icon_url,
                last_match=summary,
            )
        )
