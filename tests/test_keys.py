import pytest

from dualkeyremap.keys import KEYS, KeyDef, find_key_by_name


def test_escape_definition():
    key = find_key_by_name("ESCAPE")
    assert key == KeyDef("ESCAPE", 0x1B, 0x01)


def test_capslock_definition():
    key = find_key_by_name("CAPSLOCK")
    assert (key.virt_code, key.scan_code) == (0x14, 0x3A)


@pytest.mark.parametrize("spelling", ["capslock", "CapsLock", "cApSlOcK", "CAPSLOCK"])
def test_lookup_ignores_case(spelling):
    assert find_key_by_name(spelling) == find_key_by_name("CAPSLOCK")


@pytest.mark.parametrize("name", ["", "NOPE", "CAPS LOCK", "F13", " ESCAPE"])
def test_unknown_names(name):
    assert find_key_by_name(name) is None


def test_non_ascii_lookalike_does_not_match():
    # KELVIN SIGN lowercases to "k" but is not an ASCII letter.
    assert find_key_by_name("\u212a") is None


def test_every_key_found_by_its_name():
    for key in KEYS:
        assert find_key_by_name(key.name) == key
        assert find_key_by_name(key.name.lower()) == key


def test_each_name_finds_a_distinct_key():
    found = {find_key_by_name(key.name) for key in KEYS}
    assert len(found) == len(KEYS)


def test_extended_keys():
    assert find_key_by_name("RCTRL").is_extended is True
    assert find_key_by_name("DELETE").is_extended is True
    assert find_key_by_name("LCTRL").is_extended is False


def test_keydef_is_immutable():
    key = find_key_by_name("A")
    with pytest.raises(AttributeError):
        key.name = "B"
    assert key.name == "A"
    assert find_key_by_name("A") == KeyDef("A", 0x41, 0x1E)