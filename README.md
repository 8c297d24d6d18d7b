# dualkeyremap

Give one key two meanings: one when it is tapped on its own, another when it
is held down while other input happens. The usual case is Caps Lock, which
sends Escape when tapped and acts as Ctrl when held down with another key.

The package holds the configuration reader, the key table and the state
machine that decides what each event turns into. Key output is simulated:
every key the remapper would send is printed to standard output.

## Configuration

The configuration is a text file of `key=value` lines. Blank lines and lines
that start with `#` are skipped, and settings other than the three below
(for example `debug=1`) are ignored.

```
# Caps Lock: Escape when tapped, Ctrl when combined
remap_key=CAPSLOCK
when_alone=ESCAPE
with_other=CTRL
```

`remap_key` starts a new remapping; it is complete, and stored, as soon as
it has both `when_alone` and `with_other`. These errors raise
`dualkeyremap.config.ConfigError` (a `ValueError`), with the line number in
the message:

- a non-blank, non-comment line without `=`;
- an unknown key name;
- `when_alone` or `with_other` before any `remap_key`;
- a `remap_key` while the previous remapping is still incomplete;
- an incomplete remapping at the end of the file.

Key names are matched without regard to ASCII case. Known names:
`CAPSLOCK`, `ESCAPE`, `CTRL`, `LCTRL`, `RCTRL`, `SHIFT`, `LSHIFT`, `RSHIFT`,
`ALT`, `LALT`, `RALT`, `SPACE`, `ENTER`, `TAB`, `BACKSPACE`, `DELETE`,
`HOME`, `END`, `PAGEUP`, `PAGEDOWN`, `UP`, `DOWN`, `LEFT`, `RIGHT`, the
letters `A` to `Z`, the digits `0` to `9` and the function keys `F1` to
`F12`.

## Running

```
dualkeyremap [CONFIG]
```

Without an argument the command reads `config.txt` from the directory of the
running program. It prints the remappings it found, one per line, for
example:

```
Remap 1: CAPSLOCK -> ESCAPE (alone) / CTRL (with other)
```

and then waits for Enter. If the configuration cannot be read or is invalid,
it prints the error and waits for Enter as well. The exit status is 0 in
both cases.

## Library use

```python
from dualkeyremap.config import parse_config
from dualkeyremap.input import Direction
from dualkeyremap.remap import RemapManager, State

config = parse_config("remap_key=CAPSLOCK\nwhen_alone=ESCAPE\nwith_other=CTRL\n")
sent = []
manager = RemapManager(config.remaps, send=lambda key, d: sent.append((key.name, d)))

manager.handle_input(0x14, Direction.DOWN, False)  # Caps Lock pressed: True (blocked)
manager.state_of(0x14)                             # State.HELD_DOWN_ALONE
manager.handle_input(0x14, Direction.UP, False)    # released alone: True
# sent == [("ESCAPE", Direction.DOWN), ("ESCAPE", Direction.UP)]
```

- `handle_input(virt_code, direction, is_injected)` returns `True` when the
  original event should be blocked. Presses and releases of a remapped key
  are always blocked; everything else is passed through.
- Any other input, or any event marked as injected, while a remapped key is
  held alone switches that key to its "with other" role and presses the
  target key. Releasing the remapped key then releases the target key
  instead of tapping the "alone" key.
- `send` defaults to `dualkeyremap.input.send_input`, which prints
  `Simulating key input: <NAME> <UP|DOWN>`.
- If the same key is remapped twice, the later remapping wins.
- `dualkeyremap.input.MOUSE_DUMMY_VK` (0xFF) is the virtual-key code to pass
  for mouse activity; `INJECTED_KEY_ID` is the marker value for events the
  program injects itself.
- `dualkeyremap.keys.find_key_by_name` returns a `KeyDef` (name,
  `virt_code`, `scan_code`, and `is_extended` for 0xE0-prefixed scan codes),
  or `None` for an unknown name.

## What it does not do

The package does not capture keyboard or mouse events from the operating
system and does not inject real key presses. The `dualkeyremap` command only
loads and reports the configuration; it feeds no events to the remapper. To
remap live input, a caller must deliver events to
`RemapManager.handle_input` and supply a `send` function that emits keys.