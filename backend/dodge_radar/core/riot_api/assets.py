"""
In-memory champion asset cache backed by Data Dragon.

Holds the current patch version plus two lookup tables built from
``champion.json``:

- ``id_to_name``: numeric champion key ("103") -> image id ("Ahri")
- ``name_to_id``: display name ("Wukong") -> image id ("MonkeyKing")

The cache is loaded once per process and never invalidated. Load failures are
logged and leave the cache as it was; lookups on an empty cache fall back to
``"Unknown"`` / the input name.
"""

import asyncio
from typing import Any, Dict, Optional, Union

import httpx
import structlog

from .constants import UNKNOWN_ASSET
from .endpoints import DataDragonEndpoints

logger = structlog.get_logger(__name__)


class ChampionAssetCache:
    """Process-wide champion lookup tables and patch version."""

    def __init__(
        self,
        base_url: str = "https://ddragon.leagueoflegends.com",
        fallback_version: str = "15.21.1",
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize an empty cache.

        :param base_url: Data Dragon base URL
        :param fallback_version: Patch used for icon URLs until a version is loaded
        :param timeout: Timeout for each CDN request
        :param http_client: Client to reuse; a short-lived one is created per load otherwise
        """
        self.endpoints = DataDragonEndpoints(base_url)
        self.fallback_version = fallback_version
        self.timeout = timeout
        self._http_client = http_client

        self.asset_version: Optional[str] = None
        self.id_to_name: Dict[str, str] = {}
        self.name_to_id: Dict[str, str] = {}
        self._load_lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self.asset_version is not None and bool(self.id_to_name)

    @property
    def version(self) -> str:
        """Loaded patch version, or the fallback when nothing is loaded yet."""
        return self.asset_version or self.fallback_version

    async def ensure_loaded(self) -> None:
        """Load version and champion tables unless already populated."""
        if self.is_loaded:
            return

        async with self._load_lock:
            if self.is_loaded:
                return
            try:
                if self._http_client is not None:
                    await self._load(self._http_client)
                else:
                    async with httpx.AsyncClient(timeout=self.timeout) as client:
                        await self._load(client)
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
                logger.error(
                    "Failed to load champion data",
                    error=str(e),
                    error_type=type(e).__name__,
                )

    async def _load(self, client: httpx.AsyncClient) -> None:
        logger.info("Fetching latest patch version")
        versions_response = await client.get(self.endpoints.versions())
        versions_response.raise_for_status()
        versions = versions_response.json()
        if not isinstance(versions, list) or not versions:
            raise ValueError("Empty version list")
        version = str(versions[0])

        logger.info("Fetching champion catalog", version=version)
        catalog_response = await client.get(self.endpoints.champion_catalog(version))
        catalog_response.raise_for_status()
        champions: Dict[str, Dict[str, Any]] = catalog_response.json()["data"]

        id_to_name: Dict[str, str] = {}
        name_to_id: Dict[str, str] = {}
        for champion in champions.values():
            id_to_name[str(champion["key"])] = champion["id"]
            name_to_id[champion["name"]] = champion["id"]

        # Swap in complete tables only
        self.id_to_name = id_to_name
        self.name_to_id = name_to_id
        self.asset_version = version
        logger.info("Loaded champion data", version=version, champions=len(id_to_name))

    def resolve_display_name(self, champion_id: Union[int, str, None]) -> str:
        """Map a numeric champion key to its image id, ``"Unknown"`` on miss."""
        if champion_id is None:
            return UNKNOWN_ASSET
        return self.id_to_name.get(str(champion_id), UNKNOWN_ASSET)

    def resolve_canonical_id(self, name: str) -> str:
        """Map a display name to its image id; unknown names are echoed back."""
        return self.name_to_id.get(name, name)

    def profile_icon_url(self, icon_id: Union[int, str, None]) -> str:
        return self.endpoints.profile_icon(self.version, icon_id if icon_id is not None else 0)
