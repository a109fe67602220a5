"""Riot API constants and enum definitions."""

from enum import Enum
from typing import Optional


class Region(str, Enum):
    """Riot API regions for regional routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform routing.

    Values are the upper-case platform codes the browser client sends.
    """

    BR1 = "BR1"
    EUN1 = "EUN1"
    EUW1 = "EUW1"
    JP1 = "JP1"
    KR = "KR"
    LA1 = "LA1"
    LA2 = "LA2"
    NA1 = "NA1"
    OC1 = "OC1"
    PH2 = "PH2"
    RU = "RU"
    SG2 = "SG2"
    TH2 = "TH2"
    TR1 = "TR1"
    TW2 = "TW2"
    VN2 = "VN2"

    @property
    def host(self) -> str:
        """Platform host name, e.g. ``euw1.api.riotgames.com``."""
        return f"{self.value.lower()}.api.riotgames.com"

    @property
    def account_route(self) -> Region:
        """Regional cluster serving account-v1 (americas, asia or europe)."""
        return ACCOUNT_ROUTES[self]

    @property
    def match_route(self) -> Region:
        """Regional cluster serving match-v5 (SEA platforms route to ``sea``)."""
        return MATCH_ROUTES[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Platform"]:
        """Case-insensitive lookup; ``None`` for unknown codes."""
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


PLATFORM_TO_REGION = {
    Platform.BR1: Region.AMERICAS,
    Platform.LA1: Region.AMERICAS,
    Platform.LA2: Region.AMERICAS,
    Platform.NA1: Region.AMERICAS,
    Platform.EUN1: Region.EUROPE,
    Platform.EUW1: Region.EUROPE,
    Platform.TR1: Region.EUROPE,
    Platform.RU: Region.EUROPE,
    Platform.JP1: Region.ASIA,
    Platform.KR: Region.ASIA,
}

# Platforms whose match-v5 data lives on the SEA cluster. Account-v1 has no
# SEA cluster, so their accounts are served from ASIA.
SEA_PLATFORMS = frozenset(
    {Platform.OC1, Platform.PH2, Platform.SG2, Platform.TH2, Platform.TW2, Platform.VN2}
)

ACCOUNT_ROUTES = {
    **PLATFORM_TO_REGION,
    **{platform: Region.ASIA for platform in SEA_PLATFORMS},
}

MATCH_ROUTES = {
    **PLATFORM_TO_REGION,
    **{platform: Region.SEA for platform in SEA_PLATFORMS},
}


class TeamId(int, Enum):
    """Team discriminators used in match and spectator payloads."""

    TEAM_ONE = 100
    TEAM_TWO = 200


UNKNOWN_ASSET = "Unknown"
RIOT_TOKEN_HEADER = "X-Riot-Token"
