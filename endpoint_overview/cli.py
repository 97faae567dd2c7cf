"""Generate the implemented-endpoints overview of twitch_api.

Cross-references the rustdoc JSON of the crate with the Helix API reference and
the EventSub subscription catalog, then writes the result between the
`<!-- BEGIN-OVERVIEW -->` / `<!-- END-OVERVIEW -->` markers of the crate sources.
"""

import argparse
import logging
from pathlib import Path

import requests

from endpoint_overview.errors import OverviewError
from endpoint_overview.run_overview import run_overview

logger = logging.getLogger("endpoint_overview")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Generate the implemented endpoints overview for twitch_api.",
    )
    ap.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Root of the twitch_api checkout (default: current directory)",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered overviews instead of patching the sources",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any reference endpoint or subscription is not implemented",
    )
    ap.add_argument(
        "--no-module-overviews",
        action="store_true",
        help="Only patch the helix and eventsub module overviews",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the overview generation."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_overview(args)
    except (OverviewError, requests.RequestException) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
