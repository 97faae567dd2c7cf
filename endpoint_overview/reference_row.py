"""Data models for rows scraped from the Twitch reference pages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HelixRow:
    """One endpoint of the Helix API reference table."""

    category: str
    name: str  # e.g. "Get Channel Information"
    link: str


@dataclass(frozen=True)
class EventSubRow:
    """One subscription type of the EventSub catalog."""

    sub_type: str  # e.g. "Channel Follow"
    link: str
    name: str  # dotted type, e.g. "channel.follow"
    version: str  # "1", "2" or a word such as "beta"

    @property
    def category(self) -> str:
        return self.name.split(".")[0]
