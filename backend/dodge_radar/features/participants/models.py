"""Domain models for the participants feature."""

from dataclasses import dataclass


@dataclass
class ParticipantProfile:
    """Riot ID and profile icon of one participant of a match."""

    puuid: str
    game_name: str
    tag_line: str
    profile_icon_id: int | str

    @classmethod
    def unresolved(cls, puuid: str) -> "ParticipantProfile":
        return cls(puuid=puuid, game_name="Unknown", tag_line="ERROR", profile_icon_id=0)
