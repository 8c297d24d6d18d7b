"""Dual-role key state machine."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .config import RemapConfig
from .input import Direction, send_input
from .keys import KeyDef

Sender = Callable[[KeyDef, Direction], object]


class State(enum.Enum):
    """Where a remapped key is in its press cycle."""

    IDLE = "idle"
    HELD_DOWN_ALONE = "held_down_alone"
    HELD_DOWN_WITH_OTHER = "held_down_with_other"


@dataclass
class Remap:
    """A configured remapping together with its current state."""

    config: RemapConfig
    state: State = State.IDLE


class RemapManager:
    """Decides, event by event, what a remapped key turns into."""

    def __init__(self, configs: Iterable[RemapConfig], send: Sender = send_input) -> None:
        # A later remapping of the same key replaces an earlier one.
        self._remaps: dict[int, Remap] = {
            config.from_key.virt_code: Remap(config) for config in configs
        }
        self._send = send

    def handle_input(self, virt_code: int, direction: Direction, is_injected: bool) -> bool:
        """Process one input event; return True if it must be blocked."""
        if is_injected or virt_code not in self._remaps:
            return self._other_input()
        remap = self._remaps[virt_code]
        if direction is Direction.DOWN:
            return self._key_down(remap)
        return self._key_up(remap)

    def state_of(self, virt_code: int) -> State:
        """Current state of the remapping for virt_code; KeyError if none."""
        return self._remaps[virt_code].state

    @staticmethod
    def _key_down(remap: Remap) -> bool:
        if remap.state is State.IDLE:
            remap.state = State.HELD_DOWN_ALONE
        return True

    def _key_up(self, remap: Remap) -> bool:
        if remap.state is State.HELD_DOWN_WITH_OTHER:
            remap.state = State.IDLE
            self._send(remap.config.to_with_other, Direction.UP)
        else:
            remap.state = State.IDLE
            key_def = remap.config.to_when_alone
            self._send(key_def, Direction.DOWN)
            self._send(key_def, Direction.UP)
        return True

    def _other_input(self) -> bool:
        for remap in self._remaps.values():
            if remap.state is State.HELD_DOWN_ALONE:
                remap.state = State.HELD_DOWN_WITH_OTHER
                self._send(remap.config.to_with_other, Direction.DOWN)
        return False