from unittest import mock

import pytest
from blessed.keyboard import Keystroke

from ntrade.keys import InputKey, parse_key, wait_input


@pytest.mark.parametrize(
    "name, expected",
    [
        ("KEY_UP", InputKey.UP),
        ("KEY_DOWN", InputKey.DOWN),
        ("KEY_LEFT", InputKey.LEFT),
        ("KEY_RIGHT", InputKey.RIGHT),
        ("KEY_ENTER", InputKey.ENTER),
        ("KEY_ESCAPE", InputKey.ESCAPE),
    ],
)
def test_named_keystrokes(name, expected):
    assert parse_key(Keystroke(ucs="", code=1, name=name)) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [("\r", InputKey.ENTER), ("\n", InputKey.ENTER), ("\x1b", InputKey.ESCAPE)],
)
def test_plain_characters(raw, expected):
    assert parse_key(raw) is expected


def test_other_keys_are_ignored():
    assert parse_key("a") is None
    assert parse_key(Keystroke(ucs="", code=2, name="KEY_F1")) is None
    assert parse_key("") is None


def test_wait_input_discards_buffer_and_skips_unknown_keys():
    with mock.patch("ntrade.keys.Terminal") as terminal_cls:
        term = terminal_cls.return_value
        term.inkey.side_effect = [
            "q",
            "",
            "a",
            Keystroke(ucs="", code=3, name="KEY_DOWN"),
        ]
        assert wait_input() is InputKey.DOWN
        assert term.inkey.call_count == 4
        term.cbreak.assert_called_once_with()