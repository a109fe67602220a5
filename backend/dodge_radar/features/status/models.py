"""Domain models for player status resolution.

These are plain dataclasses produced by the resolver and projector; the API
layer converts them to camelCase schemas in ``transformers.status_to_response``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from dodge_radar.core.riot_api import Platform


class StatusKind(str, Enum):
    """Overall classification of a player."""

    IN_GAME = "IN_GAME"
    HIGH_RISK = "HIGH_RISK"
    LOW_RISK = "LOW_RISK"
    ERROR = "ERROR"


class ResolutionState(str, Enum):
    """States of the per-player resolution state machine."""

    RESOLVING_ACCOUNT = "RESOLVING_ACCOUNT"
    RESOLVING_PROFILE = "RESOLVING_PROFILE"
    CHECKING_LIVE = "CHECKING_LIVE"
    FETCHING_HISTORY = "FETCHING_HISTORY"
    DONE = "DONE"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in (ResolutionState.DONE, ResolutionState.FAILED)


class ResolutionErrorCode(str, Enum):
    """Why a resolution ended in the FAILED state."""

    INVALID_REGION = "INVALID_REGION"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    SUMMONER_NOT_FOUND = "SUMMONER_NOT_FOUND"
    SERVER_CONFIG_ERROR = "SERVER_CONFIG_ERROR"
    MATCH_HISTORY_ERROR = "MATCH_HISTORY_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ResolutionErrorCode.INVALID_REGION: "Invalid Region",
    ResolutionErrorCode.PLAYER_NOT_FOUND: "Player Not Found",
    ResolutionErrorCode.SUMMONER_NOT_FOUND: "Summoner Not Found",
    ResolutionErrorCode.SERVER_CONFIG_ERROR: "Server API Key Error",
    ResolutionErrorCode.MATCH_HISTORY_ERROR: "Match History Error",
    ResolutionErrorCode.UPSTREAM_UNAVAILABLE: "Riot API Unavailable",
    ResolutionErrorCode.INTERNAL_ERROR: "Internal Error",
}


class LiveLookupOutcome(str, Enum):
    """Result of the spectator lookup.

    NOT_FOUND and FORBIDDEN both mean "no live visibility"; FORBIDDEN (the
    player hides their live game) only changes the high-risk wording.
    """

    IN_GAME = "IN_GAME"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class PlayerIdentity:
    """One account to look up, as supplied by the caller."""

    game_name: str
    tag_line: str
    region: str

    @property
    def platform(self) -> Optional[Platform]:
        return Platform.parse(self.region)

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


@dataclass(frozen=True)
class BatchEntry:
    """A player in a batch request, tagged with the caller's id."""

    entry_id: Any
    identity: PlayerIdentity


@dataclass
class RosterEntry:
    game_name: str
    tag_line: str
    champion_played: str


@dataclass
class LiveMatchInfo:
    """Snapshot of an in-progress game."""

    game_start_time: int
    elapsed_seconds: int
    team1_bans: List[str] = field(default_factory=list)
    team2_bans: List[str] = field(default_factory=list)
    team1: List[RosterEntry] = field(default_factory=list)
    team2: List[RosterEntry] = field(default_factory=list)

    @property
    def all_bans(self) -> List[str]:
        return [*self.team1_bans, *self.team2_bans]


@dataclass
class CompletedMatchSummary:
    """A finished match seen from the tracked player's side."""

    win: bool
    champion_played: str
    kda: str
    team1_bans: List[str] = field(default_factory=list)
    team2_bans: List[str] = field(default_factory=list)
    team1: List[RosterEntry] = field(default_factory=list)
    team2: List[RosterEntry] = field(default_factory=list)
    game_end_timestamp: Optional[int] = None

    @property
    def all_bans(self) -> List[str]:
        return [*self.team1_bans, *self.team2_bans]


@dataclass
class PlayerStatus:
    """Output of one resolver run."""

    status: StatusKind
    message: str
    is_champ_banned: Optional[bool] = None
    profile_icon_url: Optional[str] = None
    live_match: Optional[LiveMatchInfo] = None
    last_match: Optional[CompletedMatchSummary] = None
    error_code: Optional[ResolutionErrorCode] = None

    @classmethod
    def error(
        cls, code: ResolutionErrorCode, profile_icon_url: Optional[str] = None
    ) -> "PlayerStatus":
        return cls(
            status=StatusKind.ERROR,
            message=code.message,
            profile_icon_url=profile_icon_url,
            error_code=code,
        )
