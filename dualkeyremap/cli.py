"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import Config, ConfigError, load_config
from .remap import RemapManager


def default_config_path() -> Path:
    """config.txt in the directory of the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "."
    return Path(program).resolve().parent / "config.txt"


def describe_remaps(config: Config) -> list[str]:
    """One summary line per configured remapping."""
    return [
        f"Remap {number}: {remap.from_key.name} -> {remap.to_when_alone.name} (alone)"
        f" / {remap.to_with_other.name} (with other)"
        for number, remap in enumerate(config.remaps, start=1)
    ]


def _wait_for_enter() -> None:
    sys.stdin.readline()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, report it and wait for Enter."""
    parser = argparse.ArgumentParser(
        prog="dual-key-remap",
        description="Give a key one role when tapped and another when held.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        help="configuration file (default: config.txt next to the program)",
    )
    args = parser.parse_args(argv)

    print("Dual Key Remap")
    print("==============================")

    config_path = args.config if args.config is not None else default_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        print(f"Error loading config: {exc}")
        print("Make sure config.txt exists in the same directory as the executable.")
        print("\nPress Enter to exit...")
        _wait_for_enter()
        return 0

    print("Configuration loaded successfully!")
    print(f"Number of remaps: {len(config.remaps)}")
    for line in describe_remaps(config):
        print(line)

    RemapManager(config.remaps)

    print("\nNote: key events are simulated and reported on standard output.")
    print("\nSimulating key remapping behavior...")
    print("Press Enter to exit...")
    _wait_for_enter()
    return 0


if __name__ == "__main__":
    sys.exit(main())