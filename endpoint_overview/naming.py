"""Name conversions between the reference pages and Rust identifiers."""

import re

NUMERIC_VERSION_RE = re.compile(r"^\d+$")


def to_snake(s: str) -> str:
    """'Get Channel Information' -> 'get_channel_information'."""
    return s.lower().replace(" ", "_")


def to_pascal(s: str) -> str:
    """'channel_points' -> 'ChannelPoints'."""
    return "".join(word[:1].upper() + word[1:] for word in s.split("_") if word)


def subscription_struct_name(name: str, version: str) -> str:
    """Derive the Rust type name of an EventSub subscription.

    The category is dropped when the next segment repeats it, so
    `channel.channel_points_custom_reward.add` does not become
    `ChannelChannelPoints...`. Numeric versions become `V{n}`, others are
    PascalCased (`beta` -> `Beta`).
    """
    parts = name.split(".")
    if len(parts) > 1 and parts[1].startswith(parts[0]):
        parts = parts[1:]
    base = "".join(to_pascal(p) for p in parts)
    if NUMERIC_VERSION_RE.match(version):
        return f"{base}V{version}"
    return base + to_pascal(version)
