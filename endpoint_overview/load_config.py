"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from endpoint_overview.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "rustdoc_json": "target/doc/twitch_api.json",
        "helix_overview": "src/helix/mod.rs",
        "eventsub_overview": "src/eventsub/mod.rs",
        "helix_endpoints_dir": "src/helix/endpoints",
    },
    "sources": {
        "helix_url": "https://dev.twitch.tv/docs/api/reference",
        "helix_table_id": "twitch-api-reference",
        "eventsub_url": "https://dev.twitch.tv/docs/eventsub/eventsub-subscription-types",
        "eventsub_table_id": "subscription-types",
        "timeout": 30,
    },
    "markers": {
        "begin": "//! <!-- BEGIN-OVERVIEW -->",
        "end": "//! <!-- END-OVERVIEW -->",
        "comment_prefix": "//! ",
    },
    # snake_case names derived from the reference that don't match the crate
    "overrides": {
        "categories": {
            "ads": "channels",
            "channel_points": "points",
            "conduits": "eventsub",
            "hype_train": "hypetrain",
        },
        "items": {
            "create_conduits": "create_conduit",
            "get_hype_train_events": "get_hypetrain_events",
            "resolve_unban_requests": "resolve_unban_request",
        },
        "modules": {
            "add_channel_vip": "channels",
            "get_vips": "channels",
            "remove_channel_vip": "channels",
            "get_stream_tags": "streams",
        },
    },
    "strict": False,
    "module_overviews": True,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
