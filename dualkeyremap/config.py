"""Reading the remapping configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .keys import KeyDef, find_key_by_name


class ConfigError(ValueError):
    """The configuration could not be read or is invalid."""


@dataclass(frozen=True)
class RemapConfig:
    """One remapping: a source key and its two replacements."""

    from_key: KeyDef
    to_when_alone: KeyDef
    to_with_other: KeyDef


@dataclass
class Config:
    """All remappings, in the order they were defined."""

    remaps: list[RemapConfig] = field(default_factory=list)


@dataclass
class _PendingRemap:
    from_key: KeyDef
    when_alone: KeyDef | None = None
    with_other: KeyDef | None = None

    @property
    def is_complete(self) -> bool:
        return self.when_alone is not None and self.with_other is not None

    def build(self) -> RemapConfig:
        if self.when_alone is None:
            raise ConfigError("Missing when_alone")
        if self.with_other is None:
            raise ConfigError("Missing with_other")
        return RemapConfig(self.from_key, self.when_alone, self.with_other)


def _lookup(value: str, line_num: int) -> KeyDef:
    key_def = find_key_by_name(value)
    if key_def is None:
        raise ConfigError(f"Config error (line {line_num}): invalid key name '{value}'")
    return key_def


def parse_config(content: str) -> Config:
    """Parse configuration text of key=value lines into a Config."""
    config = Config()
    pending: _PendingRemap | None = None

    for line_num, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"Config error (line {line_num}): expected key=value")
        key = key.strip()
        value = value.strip()

        if key == "remap_key":
            if pending is not None:
                # Complete remaps are stored at once, so anything left is partial.
                raise ConfigError(
                    f"Config error (line {line_num}): Incomplete remapping. Each remap "
                    "needs remap_key, when_alone and with_other before another remap_key."
                )
            pending = _PendingRemap(_lookup(value, line_num))
        elif key in ("when_alone", "with_other"):
            key_def = _lookup(value, line_num)
            if pending is None:
                raise ConfigError(
                    f"Config error (line {line_num}): {key} must come after remap_key"
                )
            if key == "when_alone":
                pending.when_alone = key_def
            else:
                pending.with_other = key_def
        else:
            # Other settings (such as debug) are ignored.
            continue

        if pending is not None and pending.is_complete:
            config.remaps.append(pending.build())
            pending = None

    if pending is not None:
        raise ConfigError("Config error: Incomplete remapping at end of file")

    return config


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read and parse the configuration file at path."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(
            f"Cannot open configuration file '{os.fspath(path)}': {exc}"
        ) from exc
    return parse_config(content)