"""Injection of synthetic key events."""

from __future__ import annotations

import enum

from .keys import KeyDef

# Marker attached to events this program injects itself.
INJECTED_KEY_ID = 0xFFC3CED7

# Virtual-key code used to report mouse activity to the remapper.
MOUSE_DUMMY_VK = 0xFF


class Direction(enum.Enum):
    """Whether a key goes up or down."""

    UP = "UP"
    DOWN = "DOWN"


def send_input(key_def: KeyDef, direction: Direction) -> None:
    """Emit a key event; this build reports the simulated event on stdout."""
    print(f"Simulating key input: {key_def.name} {direction.value}")