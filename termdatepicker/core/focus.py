"""Focus model and intent legality for the date picker."""

from enum import Enum


class Focus(Enum):
    """Which part of the picker currently owns navigation input."""

    NONE = "none"
    HEADER_MONTH = "month"
    HEADER_YEAR = "year"
    CALENDAR = "calendar"

    @classmethod
    def parse(cls, name: str) -> "Focus":
        """Look up a focus by value or member name, case-insensitively.

        Raises:
            ValueError: If ``name`` matches no focus
        """
        key = name.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown focus: {name!r}")


class Intent(Enum):
    """Pre-classified user actions accepted by the navigation controller."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FOCUS_NEXT = "focus_next"
    FOCUS_PREV = "focus_prev"
    QUIT = "quit"


class Action(Enum):
    """Concrete operation an intent resolves to in a given focus."""

    NOOP = "noop"
    QUIT = "quit"
    PREV_DAY = "prev_day"
    NEXT_DAY = "next_day"
    PREV_WEEK = "prev_week"
    NEXT_WEEK = "next_week"
    PREV_MONTH = "prev_month"
    NEXT_MONTH = "next_month"
    PREV_YEAR = "prev_year"
    NEXT_YEAR = "next_year"
    FOCUS_MONTH = "focus_month"
    FOCUS_YEAR = "focus_year"
    FOCUS_CALENDAR = "focus_calendar"

    @property
    def changes_date(self) -> bool:
        return self in _DATE_ACTIONS

    @property
    def changes_focus(self) -> bool:
        return self in _FOCUS_TARGETS


_DATE_ACTIONS = frozenset(
    {
        Action.PREV_DAY,
        Action.NEXT_DAY,
        Action.PREV_WEEK,
        Action.NEXT_WEEK,
        Action.PREV_MONTH,
        Action.NEXT_MONTH,
        Action.PREV_YEAR,
        Action.NEXT_YEAR,
    }
)

_FOCUS_TARGETS = {
    Action.FOCUS_MONTH: Focus.HEADER_MONTH,
    Action.FOCUS_YEAR: Focus.HEADER_YEAR,
    Action.FOCUS_CALENDAR: Focus.CALENDAR,
}

# Directional intents per focus; anything missing is a no-op.
_DIRECTIONAL = {
    Focus.HEADER_MONTH: {
        Intent.UP: Action.PREV_MONTH,
        Intent.DOWN: Action.NEXT_MONTH,
        Intent.RIGHT: Action.FOCUS_YEAR,
    },
    Focus.HEADER_YEAR: {
        Intent.UP: Action.PREV_YEAR,
        Intent.DOWN: Action.NEXT_YEAR,
        Intent.LEFT: Action.FOCUS_MONTH,
    },
    Focus.CALENDAR: {
        Intent.UP: Action.PREV_WEEK,
        Intent.DOWN: Action.NEXT_WEEK,
        Intent.LEFT: Action.PREV_DAY,
        Intent.RIGHT: Action.NEXT_DAY,
    },
    Focus.NONE: {},
}

_ADVANCE = {
    Focus.HEADER_MONTH: Focus.HEADER_YEAR,
    Focus.HEADER_YEAR: Focus.CALENDAR,
}

_RETREAT = {
    Focus.CALENDAR: Focus.HEADER_YEAR,
    Focus.HEADER_YEAR: Focus.HEADER_MONTH,
}


def advance(focus: Focus) -> Focus:
    """Move focus one step towards the calendar; stops at CALENDAR."""
    return _ADVANCE.get(focus, focus)


def retreat(focus: Focus) -> Focus:
    """Move focus one step towards the month header; stops at HEADER_MONTH."""
    return _RETREAT.get(focus, focus)


def focus_target(action: Action) -> Focus:
    """Return the focus a focus-changing action moves to."""
    return _FOCUS_TARGETS[action]


def _focus_action(target: Focus, current: Focus) -> Action:
    if target == current:
        return Action.NOOP
    for action, focus in _FOCUS_TARGETS.items():
        if focus == target:
            return action
    return Action.NOOP


def resolve(focus: Focus, intent: Intent) -> Action:
    """Resolve ``intent`` to the action it performs while ``focus`` is active.

    QUIT is honoured in every focus. FOCUS_NEXT and FOCUS_PREV follow the
    month -> year -> calendar ordering and never wrap; NONE ignores them.
    """
    if intent == Intent.QUIT:
        return Action.QUIT
    if intent == Intent.FOCUS_NEXT:
        return _focus_action(advance(focus), focus)
    if intent == Intent.FOCUS_PREV:
        return _focus_action(retreat(focus), focus)
    return _DIRECTIONAL[focus].get(intent, Action.NOOP)
