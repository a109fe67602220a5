"""Riot API endpoint definitions and routing information."""

from typing import Union
from urllib.parse import quote

from .constants import Region, Platform


def _segment(value: str) -> str:
    """Percent-encode one path segment (Riot IDs may contain spaces and unicode)."""
    return quote(value, safe="")


class RiotAPIEndpoints:
    """Riot API endpoint definitions and routing."""

    @staticmethod
    def get_base_url(region: Region) -> str:
        """Get base URL for regional endpoints."""
        return f"https://{region.value}.api.riotgames.com"

    @classmethod
    def get_account_base_url(cls, region: Union[Region, Platform]) -> str:
        """Base URL for account-v1; platforms resolve via ``account_route``."""
        if isinstance(region, Platform):
            region = region.account_route
        return cls.get_base_url(region)

    @classmethod
    def get_match_base_url(cls, region: Union[Region, Platform]) -> str:
        """Base URL for match-v5; platforms resolve via ``match_route``."""
        if isinstance(region, Platform):
            region = region.match_route
        return cls.get_base_url(region)

    @staticmethod
    def get_platform_url(platform: Platform) -> str:
        """Get base URL for platform endpoints."""
        return f"https://{platform.host}"

    # Account endpoints (Regional)
    def account_by_riot_id(
        self, game_name: str, tag_line: str, region: Union[Region, Platform]
    ) -> str:
        """Get account by Riot ID endpoint."""
        base_url = self.get_account_base_url(region)
        return (
            f"{base_url}/riot/account/v1/accounts/by-riot-id/"
            f"{_segment(game_name)}/{_segment(tag_line)}"
        )

    def account_by_puuid(self, puuid: str, region: Union[Region, Platform]) -> str:
        """Get account by PUUID endpoint."""
        base_url = self.get_account_base_url(region)
        return f"{base_url}/riot/account/v1/accounts/by-puuid/{puuid}"

    # Summoner endpoints (Platform)
    def summoner_by_puuid(self, puuid: str, platform: Platform) -> str:
        """Get summoner by PUUID endpoint."""
        platform_url = self.get_platform_url(platform)
        return f"{platform_url}/lol/summoner/v4/summoners/by-puuid/{puuid}"

    # Spectator endpoints (Platform)
    def active_game_by_puuid(self, puuid: str, platform: Platform) -> str:
        """Get current game by PUUID endpoint (spectator v5)."""
        platform_url = self.get_platform_url(platform)
        return f"{platform_url}/lol/spectator/v5/active-games/by-summoner/{puuid}"

    # Match endpoints (Regional)
    def match_ids_by_puuid(self, puuid: str, region: Union[Region, Platform]) -> str:
        """Get match id list by PUUID endpoint (query parameters passed separately)."""
        base_url = self.get_match_base_url(region)
        return f"{base_url}/lol/match/v5/matches/by-puuid/{puuid}/ids"

    def match_by_id(self, match_id: str, region: Union[Region, Platform]) -> str:
        """Get match by ID endpoint."""
        base_url = self.get_match_base_url(region)
        return f"{base_url}/lol/match/v5/matches/{match_id}"


class DataDragonEndpoints:
    """Public static-asset CDN endpoints (no credential)."""

    def __init__(self, base_url: str = "https://ddragon.leagueoflegends.com"):
        self.base_url = base_url.rstrip("/")

    def versions(self) -> str:
        return f"{self.base_url}/api/versions.json"

    def champion_catalog(self, version: str, locale: str = "en_US") -> str:
        return f"{self.base_url}/cdn/{version}/data/{locale}/champion.json"

    def profile_icon(self, version: str, icon_id: Union[int, str]) -> str:
        return f"{self.base_url}/cdn/{version}/img/profileicon/{icon_id}.png"
