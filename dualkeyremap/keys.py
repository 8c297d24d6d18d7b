"""Key definitions: names, virtual-key codes and scan codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyDef:
    """A named key with its virtual-key code and scan code."""

    name: str
    virt_code: int
    scan_code: int

    @property
    def is_extended(self) -> bool:
        """True for keys whose scan code carries the 0xE0 prefix."""
        return (self.scan_code >> 8) == 0xE0


KEYS: tuple[KeyDef, ...] = (
    KeyDef("CAPSLOCK", 0x14, 0x3A),
    KeyDef("ESCAPE", 0x1B, 0x01),
    KeyDef("CTRL", 0x11, 0x1D),
    KeyDef("LCTRL", 0xA2, 0x1D),
    KeyDef("RCTRL", 0xA3, 0xE01D),
    KeyDef("SHIFT", 0x10, 0x2A),
    KeyDef("LSHIFT", 0xA0, 0x2A),
    KeyDef("RSHIFT", 0xA1, 0x36),
    KeyDef("ALT", 0x12, 0x38),
    KeyDef("LALT", 0xA4, 0x38),
    KeyDef("RALT", 0xA5, 0xE038),
    KeyDef("SPACE", 0x20, 0x39),
    KeyDef("ENTER", 0x0D, 0x1C),
    KeyDef("TAB", 0x09, 0x0F),
    KeyDef("BACKSPACE", 0x08, 0x0E),
    KeyDef("DELETE", 0x2E, 0xE053),
    KeyDef("HOME", 0x24, 0xE047),
    KeyDef("END", 0x23, 0xE04F),
    KeyDef("PAGEUP", 0x21, 0xE049),
    KeyDef("PAGEDOWN", 0x22, 0xE051),
    KeyDef("UP", 0x26, 0xE048),
    KeyDef("DOWN", 0x28, 0xE050),
    KeyDef("LEFT", 0x25, 0xE04B),
    KeyDef("RIGHT", 0x27, 0xE04D),
    # Letters
    KeyDef("A", 0x41, 0x1E),
    KeyDef("B", 0x42, 0x30),
    KeyDef("C", 0x43, 0x2E),
    KeyDef("D", 0x44, 0x20),
    KeyDef("E", 0x45, 0x12),
    KeyDef("F", 0x46, 0x21),
    KeyDef("G", 0x47, 0x22),
    KeyDef("H", 0x48, 0x23),
    KeyDef("I", 0x49, 0x17),
    KeyDef("J", 0x4A, 0x24),
    KeyDef("K", 0x4B, 0x25),
    KeyDef("L", 0x4C, 0x26),
    KeyDef("M", 0x4D, 0x32),
    KeyDef("N", 0x4E, 0x31),
    KeyDef("O", 0x4F, 0x18),
    KeyDef("P", 0x50, 0x19),
    KeyDef("Q", 0x51, 0x10),
    KeyDef("R", 0x52, 0x13),
    KeyDef("S", 0x53, 0x1F),
    KeyDef("T", 0x54, 0x14),
    KeyDef("U", 0x55, 0x16),
    KeyDef("V", 0x56, 0x2F),
    KeyDef("W", 0x57, 0x11),
    KeyDef("X", 0x58, 0x2D),
    KeyDef("Y", 0x59, 0x15),
    KeyDef("Z", 0x5A, 0x2C),
    # Digits
    KeyDef("0", 0x30, 0x0B),
    KeyDef("1", 0x31, 0x02),
    KeyDef("2", 0x32, 0x03),
    KeyDef("3", 0x33, 0x04),
    KeyDef("4", 0x34, 0x05),
    KeyDef("5", 0x35, 0x06),
    KeyDef("6", 0x36, 0x07),
    KeyDef("7", 0x37, 0x08),
    KeyDef("8", 0x38, 0x09),
    KeyDef("9", 0x39, 0x0A),
    # Function keys
    KeyDef("F1", 0x70, 0x3B),
    KeyDef("F2", 0x71, 0x3C),
    KeyDef("F3", 0x72, 0x3D),
    KeyDef("F4", 0x73, 0x3E),
    KeyDef("F5", 0x74, 0x3F),
    KeyDef("F6", 0x75, 0x40),
    KeyDef("F7", 0x76, 0x41),
    KeyDef("F8", 0x77, 0x42),
    KeyDef("F9", 0x78, 0x43),
    KeyDef("F10", 0x79, 0x44),
    KeyDef("F11", 0x7A, 0x57),
    KeyDef("F12", 0x7B, 0x58),
)

_BY_NAME: dict[str, KeyDef] = {}
for _key in KEYS:
    _BY_NAME.setdefault(_key.name.lower(), _key)
del _key


def find_key_by_name(name: str) -> KeyDef | None:
    """Look up a key by name, ignoring ASCII case; None if unknown."""
    # Only ASCII letters fold, so non-ASCII lookalikes never match.
    if not name.isascii():
        return None
    return _BY_NAME.get(name.lower())