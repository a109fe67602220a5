"""Time and ban helpers shared by the resolver and projector."""

import time
from typing import Iterable, Optional


def epoch_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def format_time_ago(minutes: int) -> str:
    """Render whole minutes as "Just now", "Nm ago", "Hh ago" or "Dd ago"."""
    if minutes <= 0:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"

    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"

    days = hours // 24
    return f"{days}d ago"


def format_elapsed(seconds: int) -> str:
    """Render a game clock as M:SS."""
    seconds = max(0, seconds)
    return f"{seconds // 60}:{seconds % 60:02d}"


def elapsed_seconds_since(start_ms: Optional[int], now_ms: int) -> int:
    """Whole seconds since ``start_ms``; 0 for unset or future start times."""
    if not start_ms or start_ms <= 0:
        return 0
    return max(0, (now_ms - start_ms) // 1000)


def minutes_since(end_ms: Optional[int], now_ms: int) -> int:
    """Whole minutes since ``end_ms``; 0 when missing, non-positive or in the future."""
    if not isinstance(end_ms, (int, float)) or isinstance(end_ms, bool) or end_ms <= 0:
        return 0
    return max(0, int((now_ms - end_ms) // 60000))


def is_champion_banned(bans: Iterable[str], champion_key: str) -> Optional[bool]:
    """Case-insensitive membership test; ``None`` when no champion is watched."""
    if not champion_key:
        return None
    wanted = champion_key.lower()
    return any(ban.lower() == wanted for ban in bans)
