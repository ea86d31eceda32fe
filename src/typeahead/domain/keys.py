"""Key codes and their classification into typeahead actions.

Navigation, commit and dismiss are read from key-down events. Text changes
are read from key-up events, because only then does the field hold the
updated value.
"""

from enum import Enum, IntEnum

__all__ = [
    "Action",
    "Key",
    "KeyChannel",
    "classify",
    "classify_key_down",
    "classify_key_up",
]


class Key(IntEnum):
    """Key codes the controller cares about (DOM ``keyCode`` values)."""

    UNIDENTIFIED = 0
    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    SHIFT = 16
    ESCAPE = 27
    ARROW_LEFT = 37
    ARROW_UP = 38
    ARROW_RIGHT = 39
    ARROW_DOWN = 40


class KeyChannel(Enum):
    """Event channel a key code arrived on."""

    KEY_DOWN = "keydown"
    KEY_UP = "keyup"


class Action(Enum):
    """Semantic action derived from a key event."""

    COMMIT = "commit"
    DISMISS = "dismiss"
    NAVIGATE_PREV = "navigate_prev"
    NAVIGATE_NEXT = "navigate_next"
    IGNORE = "ignore"
    TEXT_CHANGED = "text_changed"


_KEY_DOWN_ACTIONS: dict[int, Action] = {
    Key.ENTER: Action.COMMIT,
    Key.ESCAPE: Action.DISMISS,
    Key.ARROW_UP: Action.NAVIGATE_PREV,
    Key.ARROW_DOWN: Action.NAVIGATE_NEXT,
}

# Keys that never alter the text in a way worth a new suggestion fetch.
# Enter and Escape are ignored here as well, unlike a plain "every other
# key-up is a text change" rule: both were consumed on key-down, and a
# query fed on their key-up would reopen the list that was just closed.
_KEY_UP_IGNORED: frozenset[int] = frozenset(
    {
        Key.TAB,
        Key.SHIFT,
        Key.ARROW_LEFT,
        Key.ARROW_RIGHT,
        Key.ARROW_UP,
        Key.ARROW_DOWN,
        Key.ENTER,
        Key.ESCAPE,
    }
)


def classify_key_down(key_code: int) -> Action:
    """Classify a key-down code; anything unmapped is ignored."""
    return _KEY_DOWN_ACTIONS.get(key_code, Action.IGNORE)


def classify_key_up(key_code: int) -> Action:
    """Classify a key-up code; anything not ignored is a candidate query update."""
    if key_code in _KEY_UP_IGNORED:
        return Action.IGNORE
    return Action.TEXT_CHANGED


def classify(key_code: int, channel: KeyChannel) -> Action:
    """
    Map a raw key code to a semantic action.

    Total over all integers: unknown codes map to IGNORE on key-down and
    TEXT_CHANGED on key-up.

    Args:
        key_code: Raw key code (``Key`` member or plain int)
        channel: Channel the event arrived on

    Returns:
        The classified Action
    """
    if channel is KeyChannel.KEY_DOWN:
        return classify_key_down(key_code)
    return classify_key_up(key_code)
