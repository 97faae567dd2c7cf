"""Orchestration logic for generating the implemented-endpoints overview."""

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from endpoint_overview.api_surface import extract_api_surface
from endpoint_overview.correlate_eventsub import correlate_eventsub
from endpoint_overview.correlate_helix import correlate_helix, module_for_category
from endpoint_overview.coverage import EventSubCoverage, HelixCoverage, group_by
from endpoint_overview.errors import UnmatchedReferenceItems
from endpoint_overview.fetch_page import fetch_page
from endpoint_overview.load_config import load_config
from endpoint_overview.load_rustdoc import load_rustdoc
from endpoint_overview.patch_region import (
    has_markers,
    patch_region,
    require_markers,
)
from endpoint_overview.render_overview import (
    render_eventsub_overview,
    render_helix_module_overview,
    render_helix_overview,
)
from endpoint_overview.rustdoc_index import RustdocIndex
from endpoint_overview.scrape_reference import parse_eventsub_table, parse_helix_table

logger = logging.getLogger(__name__)


def run_overview(args: argparse.Namespace) -> int:
    """Execute the full overview pipeline."""
    config = load_config(args.config)
    if args.strict:
        config["strict"] = True
    if args.no_module_overviews:
        config["module_overviews"] = False
    root = Path(args.root).resolve()

    index, helix_html, eventsub_html = _load_inputs(root, config)
    surface = extract_api_surface(index)

    sources = config["sources"]
    helix = correlate_helix(
        parse_helix_table(helix_html, sources["helix_table_id"], sources["helix_url"]),
        surface,
        config["overrides"],
    )
    eventsub = correlate_eventsub(
        parse_eventsub_table(
            eventsub_html, sources["eventsub_table_id"], sources["eventsub_url"]
        ),
        surface,
    )
    _log_totals("Helix", helix)
    _log_totals("EventSub", eventsub)

    documents = _render_documents(root, config, helix, eventsub)
    if config["strict"]:
        _check_all_implemented(helix, eventsub)

    markers = config["markers"]
    if args.dry_run:
        for path, content in documents:
            print(f"--- {path} ---")
            print(content, end="")
        return 0

    # Every target must be patchable before the first one is written.
    for path, _ in documents:
        require_markers(path, markers["begin"], markers["end"])
    for path, content in documents:
        patch_region(path, markers["begin"], markers["end"], content)
    return 0


def _load_inputs(root: Path, config: dict[str, Any]) -> tuple[RustdocIndex, str, str]:
    """Load the rustdoc index and both reference pages concurrently."""
    sources = config["sources"]
    timeout = sources["timeout"]
    with ThreadPoolExecutor(max_workers=3) as executor:
        index = executor.submit(load_rustdoc, root / config["paths"]["rustdoc_json"])
        helix = executor.submit(fetch_page, sources["helix_url"], timeout)
        eventsub = executor.submit(fetch_page, sources["eventsub_url"], timeout)
        return index.result(), helix.result(), eventsub.result()


def _log_totals(
    label: str, results: list[HelixCoverage] | list[EventSubCoverage]
) -> None:
    implemented = sum(1 for r in results if r.implemented)
    logger.info("%s: %d/%d implemented", label, implemented, len(results))


def _render_documents(
    root: Path,
    config: dict[str, Any],
    helix: list[HelixCoverage],
    eventsub: list[EventSubCoverage],
) -> list[tuple[Path, str]]:
    """Render every target document before anything is written."""
    paths = config["paths"]
    prefix = config["markers"]["comment_prefix"]
    documents = [
        (root / paths["eventsub_overview"], render_eventsub_overview(eventsub, prefix)),
        (root / paths["helix_overview"], render_helix_overview(helix, prefix)),
    ]
    if config["module_overviews"]:
        documents += _render_module_documents(root, config, helix)
    return documents


def _render_module_documents(
    root: Path, config: dict[str, Any], helix: list[HelixCoverage]
) -> list[tuple[Path, str]]:
    """Render the overview of each endpoint module that has overview markers."""
    endpoints_dir = root / config["paths"]["helix_endpoints_dir"]
    markers = config["markers"]
    categories = config["overrides"].get("categories", {})

    by_module = group_by(
        group_by(helix, lambda r: r.row.category).items(),
        lambda kv: module_for_category(kv[0], categories),
    )
    documents = []
    for module, groups in by_module.items():
        path = endpoints_dir / module / "mod.rs"
        if not has_markers(path, markers["begin"], markers["end"]):
            logger.debug("Skipping %s: no overview markers", path)
            continue
        content = "".join(
            render_helix_module_overview(category, results, markers["comment_prefix"])
            for category, results in groups
        )
        documents.append((path, content))
    return documents


def _check_all_implemented(
    helix: list[HelixCoverage], eventsub: list[EventSubCoverage]
) -> None:
    missing = [f"{r.module_name}::{r.item_name}" for r in helix if not r.implemented]
    missing += [r.row.name for r in eventsub if not r.implemented]
    if missing:
        raise UnmatchedReferenceItems(missing)
