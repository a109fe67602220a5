"""Riot API HTTP client with credential handling and status-code error mapping."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import httpx
import structlog

from .constants import Platform, Region, RIOT_TOKEN_HEADER
from .endpoints import RiotAPIEndpoints
from .errors import (
    ERROR_MESSAGES,
    ERRORS_BY_STATUS,
    ConfigurationError,
    RiotAPIError,
    ServiceUnavailableError,
)
from .models import AccountDTO, CurrentGameInfoDTO, SummonerDTO

logger = structlog.get_logger(__name__)


@dataclass
class UpstreamResponse:
    """Outcome of one authenticated request.

    ``synthetic`` marks a response fabricated locally because no API key is
    configured; such a response never touched the network.
    """

    status_code: int
    url: str
    data: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    synthetic: bool = False
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def missing_credential(cls, url: str) -> "UpstreamResponse":
        return cls(
            status_code=500,
            url=url,
            synthetic=True,
            reason="Server Configuration Error",
        )


class RiotAPIClient:
    """Riot API client.

    ``authenticated_request`` never raises for non-2xx responses; the typed
    ``get_*`` helpers built on top of it raise a ``RiotAPIError`` subclass
    that names the failure.
    """

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 10.0,
        user_agent: str = "DodgeRadar/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key; ``None`` or empty degrades every call to a synthetic 500
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header sent upstream
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key or None
        self.timeout = timeout
        self.user_agent = user_agent
        self.endpoints = RiotAPIEndpoints()

        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "RiotAPIClient":
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "Accept": "application/json",
                        "User-Agent": self.user_agent,
                    }
                    if self.api_key:
                        headers[RIOT_TOKEN_HEADER] = self.api_key

                    self.session = httpx.AsyncClient(
                        headers=headers,
                        timeout=httpx.Timeout(self.timeout),
                        transport=self._transport,
                    )
                    logger.debug(
                        "Riot API client session started",
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.debug("Riot API client session closed")

    async def authenticated_request(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> UpstreamResponse:
        """
        GET ``url`` with the API key attached.

        Returns a synthetic 500 without touching the network when no key is
        configured. Non-2xx responses are returned, not raised.

        Raises:
            ServiceUnavailableError: On network-level failures (DNS, connect, timeout)
        """
        if not self.api_key:
            logger.error("RIOT_API_KEY is not configured, request skipped", url=url)
            return UpstreamResponse.missing_credential(url)

        await self.start_session()
        if self.session is None:
            raise RiotAPIError("Session not initialized")

        try:
            response = await self.session.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(
                "Riot API request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ServiceUnavailableError(f"Request failed: {e}") from e

        logger.info("Riot API response", status=response.status_code, url=url)

        data = None
        if response.is_success:
            try:
                data = response.json()
            except ValueError:
                logger.warning("Riot API returned a non-JSON body", url=url)

        return UpstreamResponse(
            status_code=response.status_code,
            url=url,
            data=data,
            headers=dict(response.headers),
            reason=response.reason_phrase,
        )

    @staticmethod
    def raise_for_status(response: UpstreamResponse) -> None:
        """Raise the ``RiotAPIError`` subclass matching a failed response."""
        status = response.status_code
        if response.ok:
            if response.data is None:
                raise RiotAPIError("Malformed response body", status_code=status)
            return

        if response.synthetic:
            raise ConfigurationError("Riot API key not configured", status_code=status)

        retry_after = None
        if status == 429:
            header = response.headers.get("retry-after") or response.headers.get("Retry-After")
            retry_after = float(header) if header else None

        error_class = ERRORS_BY_STATUS.get(status, RiotAPIError)
        raise error_class(
            ERROR_MESSAGES.get(status, f"Unexpected status {status}"),
            status_code=status,
            retry_after=retry_after,
        )

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self.authenticated_request(url, params=params)
        self.raise_for_status(response)
        return response.data

    # Account endpoints
    async def get_account_by_riot_id(
        self, game_name: str, tag_line: str, region: Union[Region, Platform]
    ) -> AccountDTO:
        """Get account by Riot ID (gameName#tagLine)."""
        url = self.endpoints.account_by_riot_id(game_name, tag_line, region)
        return AccountDTO(**await self._get_json(url))

    async def get_account_by_puuid(
        self, puuid: str, region: Union[Region, Platform]
    ) -> AccountDTO:
        """Get account (Riot ID) by PUUID."""
        url = self.endpoints.account_by_puuid(puuid, region)
        return AccountDTO(**await self._get_json(url))

    # Summoner endpoints
    async def get_summoner_by_puuid(
        self, puuid: str, platform: Platform
    ) -> SummonerDTO:
        """Get summoner by PUUID."""
        url = self.endpoints.summoner_by_puuid(puuid, platform)
        return SummonerDTO(**await self._get_json(url))

    # Spectator endpoints
    async def get_active_game(
        self, puuid: str, platform: Platform
    ) -> CurrentGameInfoDTO:
        """Get the game ``puuid`` is currently playing; 404 when not in game."""
        url = self.endpoints.active_game_by_puuid(puuid, platform)
        return CurrentGameInfoDTO(**await self._get_json(url))

    # Match endpoints
    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        region: Union[Region, Platform],
        count: int = 1,
        start: int = 0,
    ) -> List[str]:
        """Get the most recent match ids, newest first."""
        url = self.endpoints.match_ids_by_puuid(puuid, region)
        data = await self._get_json(url, params={"start": start, "count": count})
        if not isinstance(data, list):
            raise RiotAPIError(
                f"Expected list response for match ids, got {type(data).__name__}"
            )
        return [str(match_id) for match_id in data]

    async def get_match(
        self, match_id: str, region: Union[Region, Platform]
    ) -> Dict[str, Any]:
        """Get the raw match record by match ID."""
        url = self.endpoints.match_by_id(match_id, region)
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise RiotAPIError(
                f"Expected object response for match, got {type(data).__name__}"
            )
        return data
