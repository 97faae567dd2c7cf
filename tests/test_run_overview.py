"""End-to-end tests of the overview pipeline with the network mocked out."""

import argparse
import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from endpoint_overview.errors import (
    MarkerNotFound,
    RustdocNotFound,
    UnmatchedReferenceItems,
)
from endpoint_overview.load_config import DEFAULT_CONFIG
from endpoint_overview.run_overview import run_overview

BEGIN = "//! <!-- BEGIN-OVERVIEW -->"
END = "//! <!-- END-OVERVIEW -->"

HELIX_HTML = """
<div><h1 id="twitch-api-reference">Reference</h1><table><tbody>
  <tr><td>Channels</td><td><a href="#get-channel-information">Get Channel Information</a></td></tr>
  <tr><td>Hype Train</td><td><a href="#get-hype-train-events">Get Hype Train Events</a></td></tr>
  <tr><td>Users</td><td><a href="#get-users">Get Users</a></td></tr>
  <tr><td>Bits</td><td><a href="#get-cheermotes">Get Cheermotes</a></td></tr>
</tbody></table></div>
"""

EVENTSUB_HTML = """
<div><h2 id="subscription-types">Types</h2><table><tbody>
  <tr><td><a href="#channelraid">Channel Raid</a></td><td><code>channel.raid</code></td><td><code>1</code></td></tr>
  <tr><td><a href="#channelfollow">Channel Follow</a></td><td><code>channel.follow</code></td><td><code>2</code></td></tr>
</tbody></table></div>
"""


def fake_fetch(url: str, timeout: float = 30) -> str:
    """Serve the reference pages from memory."""
    pages = {
        DEFAULT_CONFIG["sources"]["helix_url"]: HELIX_HTML,
        DEFAULT_CONFIG["sources"]["eventsub_url"]: EVENTSUB_HTML,
    }
    return pages[url]


def write_source(path: Path, header: str) -> None:
    """Write a Rust module with an empty overview region."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"//! {header}\n{BEGIN}\n//! stale\n{END}\nuse x;\n", encoding="utf-8")


@pytest.fixture
def crate(tmp_path: Path, rustdoc_json: dict[str, Any]) -> Path:
    """A twitch_api checkout with generated docs and overview markers."""
    doc = tmp_path / "target" / "doc" / "twitch_api.json"
    doc.parent.mkdir(parents=True)
    doc.write_text(json.dumps(rustdoc_json), encoding="utf-8")
    write_source(tmp_path / "src" / "helix" / "mod.rs", "Helix")
    write_source(tmp_path / "src" / "eventsub" / "mod.rs", "EventSub")
    write_source(tmp_path / "src" / "helix" / "endpoints" / "channels" / "mod.rs", "Channels")
    (tmp_path / "src" / "helix" / "endpoints" / "users").mkdir(parents=True)
    (tmp_path / "src" / "helix" / "endpoints" / "users" / "mod.rs").write_text("//! Users\n")
    return tmp_path


def make_args(root: Path, **kwargs: Any) -> argparse.Namespace:
    """CLI arguments with defaults."""
    values = {
        "root": root,
        "config": None,
        "dry_run": False,
        "strict": False,
        "no_module_overviews": False,
    }
    values.update(kwargs)
    return argparse.Namespace(**values)


def test_run_overview_patches_sources(crate: Path) -> None:
    """Verify that the helix, eventsub and module overviews are written."""
    with patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch):
        assert run_overview(make_args(crate)) == 0

    helix = (crate / "src" / "helix" / "mod.rs").read_text(encoding="utf-8")
    assert "stale" not in helix
    assert "Channels 🟢 1/1" in helix
    assert "Hype Train 🟢 1/1" in helix
    assert "[`hypetrain::get_hypetrain_events`]" in helix
    assert "Bits 🔴 0/1" in helix
    assert "| [Get Users](https://dev.twitch.tv/docs/api/reference#get-users) " in helix
    assert "| [`HelixClient::get_users`] | - |" in helix
    assert helix.endswith(f"//!\n{END}\nuse x;\n")

    eventsub = (crate / "src" / "eventsub" / "mod.rs").read_text(encoding="utf-8")
    assert "channel.*</code> 🟡 1/2" in eventsub
    assert eventsub.index("channel.follow") < eventsub.index("channel.raid")

    channels = (crate / "src" / "helix" / "endpoints" / "channels" / "mod.rs").read_text(
        encoding="utf-8"
    )
    assert "<details open>" in channels
    assert "[`get_channel_information`]" in channels
    users = crate / "src" / "helix" / "endpoints" / "users" / "mod.rs"
    assert users.read_text() == "//! Users\n"


def test_run_overview_is_idempotent(crate: Path) -> None:
    """Verify that a second run leaves the files untouched."""
    helix = crate / "src" / "helix" / "mod.rs"
    with patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch):
        run_overview(make_args(crate))
        first = helix.read_bytes()
        run_overview(make_args(crate))
    assert helix.read_bytes() == first


def test_run_overview_dry_run(crate: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a dry run prints instead of writing."""
    with patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch):
        run_overview(make_args(crate, dry_run=True, no_module_overviews=True))
    out = capsys.readouterr().out
    assert "Channels 🟢 1/1" in out
    assert "<details open>" not in out
    assert "stale" in (crate / "src" / "helix" / "mod.rs").read_text(encoding="utf-8")


def test_run_overview_strict_writes_nothing(crate: Path) -> None:
    """Verify that strict mode fails before any file is patched."""
    with (
        patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch),
        pytest.raises(UnmatchedReferenceItems) as exc_info,
    ):
        run_overview(make_args(crate, strict=True))
    assert "bits::get_cheermotes" in exc_info.value.missing
    assert "channel.raid" in exc_info.value.missing
    for rel in ("src/helix/mod.rs", "src/eventsub/mod.rs"):
        assert "stale" in (crate / rel).read_text(encoding="utf-8")


def test_run_overview_without_docs(tmp_path: Path) -> None:
    """Verify that missing rustdoc output aborts the run."""
    with (
        patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch),
        pytest.raises(RustdocNotFound),
    ):
        run_overview(make_args(tmp_path))


def test_run_overview_missing_marker_writes_nothing(crate: Path) -> None:
    """Verify that a target without markers aborts before any file is patched."""
    helix = crate / "src" / "helix" / "mod.rs"
    helix.write_text("//! Helix\nuse x;\n", encoding="utf-8")
    with (
        patch("endpoint_overview.run_overview.fetch_page", side_effect=fake_fetch),
        pytest.raises(MarkerNotFound) as exc_info,
    ):
        run_overview(make_args(crate))
    assert exc_info.value.path == helix.resolve()
    assert "stale" in (crate / "src" / "eventsub" / "mod.rs").read_text(encoding="utf-8")
