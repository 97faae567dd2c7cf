"""Main orchestration script for regenerating rustdoc JSON and the endpoint overview."""

import argparse
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path


def run_command(
    cmd_list: Sequence[str | Path],
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd, env=env)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full overview pipeline."""
    parser = argparse.ArgumentParser(
        description="Regenerate rustdoc JSON and the twitch_api endpoint overview."
    )
    parser.add_argument(
        "crate_dir",
        type=Path,
        help="Root of the twitch_api checkout",
    )
    parser.add_argument(
        "--generate-docs",
        action="store_true",
        help="Run 'cargo doc' with JSON output first (requires a nightly toolchain)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the overviews without patching any file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the reference lists something the crate lacks",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    crate_dir = args.crate_dir.resolve()

    if args.generate_docs:
        # 1. Generate the rustdoc JSON index
        print("--- Step 1: Generating rustdoc JSON ---")
        env = dict(os.environ)
        env["RUSTDOCFLAGS"] = "-Zunstable-options --output-format json"
        run_command(
            ["cargo", "+nightly", "doc", "--no-deps", "-F", "_all"],
            cwd=crate_dir,
            env=env,
        )

    # 2. Collect endpoints and patch the overview
    print("\n--- Step 2: Collecting endpoints ---")
    cmd = [
        sys.executable,
        "-m",
        "endpoint_overview.cli",
        "--root",
        str(crate_dir),
    ]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.strict:
        cmd.append("--strict")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=Path(__file__).parent)

    print(f"\nSUCCESS: Overview updated in {crate_dir}")


if __name__ == "__main__":
    main()
