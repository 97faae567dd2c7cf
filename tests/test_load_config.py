"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from endpoint_overview.deep_merge import deep_merge
from endpoint_overview.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_deep_merge_none_removes() -> None:
    """Verify that a null value drops the key."""
    merged = deep_merge({"t": {"ads": "channels", "x": "y"}}, {"t": {"ads": None}})
    assert merged == {"t": {"x": "y"}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["overrides"]["categories"]["hype_train"] == "hypetrain"
    assert config["strict"] is False


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config extends the override tables."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "overrides": {"items": {"get_ad_schedule": "get_ad_schedules"}},
        "strict": True,
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["strict"] is True
    assert loaded["overrides"]["items"] == {
        **DEFAULT_CONFIG["overrides"]["items"],
        "get_ad_schedule": "get_ad_schedules",
    }


def test_load_config_does_not_mutate_defaults() -> None:
    """Verify that changing a loaded config leaves the defaults alone."""
    config = load_config(None)
    config["overrides"]["categories"]["new"] = "x"
    assert "new" not in DEFAULT_CONFIG["overrides"]["categories"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to the defaults."""
    assert load_config(str(tmp_path / "missing.yml")) == DEFAULT_CONFIG
