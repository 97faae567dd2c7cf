"""Shared fixtures: a miniature rustdoc JSON index of twitch_api."""

from typing import Any

import pytest

from endpoint_overview.load_rustdoc import parse_rustdoc
from endpoint_overview.rustdoc_index import RustdocIndex


def _mod(name: str | None, items: list[int], **links: int) -> dict[str, Any]:
    return {"name": name, "links": links, "inner": {"module": {"items": items}}}


def _use(name: str, target: int | None) -> dict[str, Any]:
    return {
        "name": None,
        "links": {},
        "inner": {"use": {"source": f"x::{name}", "name": name, "id": target}},
    }


def _struct(name: str, impls: list[int] | None = None) -> dict[str, Any]:
    return {"name": name, "links": {}, "inner": {"struct": {"impls": impls or []}}}


def _impl(items: list[int], trait: str | None = None) -> dict[str, Any]:
    trait_ref = {"path": trait, "id": 999} if trait else None
    return {
        "name": None,
        "links": {},
        "inner": {"impl": {"items": items, "trait": trait_ref}},
    }


def _fn(name: str) -> dict[str, Any]:
    return {"name": name, "links": {}, "inner": {"function": {}}}


@pytest.fixture
def rustdoc_json() -> dict[str, Any]:
    """A rustdoc JSON document with helix and eventsub modules."""
    index = {
        0: _mod("twitch_api", [1, 20], helix=1, eventsub=20),
        # helix
        1: _mod("helix", [2, 3]),
        2: _use("client", 4),
        3: _use("endpoints", 10),
        4: _mod("client", [5]),
        5: _struct("HelixClient", [6, 7]),
        6: _impl([8, 9]),
        7: _impl([11], trait="Clone"),
        8: _fn("get_channel_information"),
        9: _fn("get_users"),
        11: _fn("clone"),
        10: _mod("endpoints", [12, 13]),
        12: _mod("channels", [14, 15]),
        13: _mod("hypetrain", [16]),
        14: _mod("get_channel_information", []),
        15: _struct("ChannelInformation"),
        16: _mod("get_hypetrain_events", []),
        # eventsub
        20: _mod("eventsub", [21, 22]),
        21: _mod("channel", [23, 24, 25]),
        22: _fn("make_signature"),
        23: _use("ChannelFollowV2", 30),
        24: _use("ChannelFollowV2Payload", 31),
        25: _mod("follow", []),
        30: _struct("ChannelFollowV2"),
        31: _struct("ChannelFollowV2Payload"),
    }
    return {
        "root": 0,
        "format_version": 39,
        "index": {str(k): v for k, v in index.items()},
    }


@pytest.fixture
def index(rustdoc_json: dict[str, Any]) -> RustdocIndex:
    """The fixture document parsed into a RustdocIndex."""
    return parse_rustdoc(rustdoc_json)
