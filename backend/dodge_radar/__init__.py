"""Dodge Radar backend: live-match and recent-game risk lookups for League of Legends players."""

__version__ = "0.1.0"
