"""Data models for correlated reference rows."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

from endpoint_overview.reference_row import EventSubRow, HelixRow

T = TypeVar("T")

RED = "🔴"
YELLOW = "🟡"
GREEN = "🟢"


@dataclass(frozen=True)
class HelixCoverage:
    """A Helix endpoint and the helper method / module implementing it."""

    row: HelixRow
    item_name: str
    module_name: str
    methods: tuple[str, ...] = ()  # HelixClient helper names
    module: str | None = None  # "module::item"

    @property
    def implemented(self) -> bool:
        return bool(self.methods or self.module)


@dataclass(frozen=True)
class EventSubCoverage:
    """A subscription type and the subscription / payload types implementing it."""

    row: EventSubRow
    subscription_name: str
    subscription: str | None = None
    payload: str | None = None

    @property
    def payload_name(self) -> str:
        return self.subscription_name + "Payload"

    @property
    def implemented(self) -> bool:
        return bool(self.subscription and self.payload)


def indicator_for(actual: int, total: int) -> str:
    """Status marker of a category with `actual` of `total` rows implemented."""
    if actual == 0:
        return RED
    if actual == total:
        return GREEN
    return YELLOW


def group_by(items: Iterable[T], key: Callable[[T], str]) -> dict[str, list[T]]:
    """Group items by key, keeping first-seen key order and item order."""
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
