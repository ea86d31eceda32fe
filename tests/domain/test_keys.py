"""Tests for key classification."""

import pytest

from typeahead.domain.keys import Action, Key, KeyChannel, classify, classify_key_down, classify_key_up


class TestKeyDown:
    @pytest.mark.parametrize(
        "key, action",
        [
            (Key.ENTER, Action.COMMIT),
            (Key.ESCAPE, Action.DISMISS),
            (Key.ARROW_UP, Action.NAVIGATE_PREV),
            (Key.ARROW_DOWN, Action.NAVIGATE_NEXT),
        ],
    )
    def test_mapped_keys(self, key, action):
        assert classify(key, KeyChannel.KEY_DOWN) is action

    @pytest.mark.parametrize("key", [Key.TAB, Key.SHIFT, Key.BACKSPACE, Key.ARROW_LEFT, 65, 0])
    def test_everything_else_is_ignored(self, key):
        assert classify_key_down(key) is Action.IGNORE


class TestKeyUp:
    @pytest.mark.parametrize(
        "key",
        [Key.TAB, Key.SHIFT, Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_UP, Key.ARROW_DOWN],
    )
    def test_non_editing_keys_do_not_requery(self, key):
        assert classify(key, KeyChannel.KEY_UP) is Action.IGNORE

    def test_enter_and_escape_are_consumed_on_key_down(self):
        assert classify_key_up(Key.ENTER) is Action.IGNORE
        assert classify_key_up(Key.ESCAPE) is Action.IGNORE

    @pytest.mark.parametrize("key", [Key.BACKSPACE, Key.UNIDENTIFIED, 65, 90, 186])
    def test_other_keys_change_text(self, key):
        assert classify_key_up(key) is Action.TEXT_CHANGED


def test_plain_integers_match_enum_members():
    assert classify(13, KeyChannel.KEY_DOWN) is Action.COMMIT
    assert classify(40, KeyChannel.KEY_DOWN) is Action.NAVIGATE_NEXT
