"""Navigation state management for the date picker.

``apply`` is the pure entry point: it takes a ``PickerState`` and an
``Intent`` and returns an ``Update`` carrying the next state, an optional
range rejection and an optional follow-up effect. ``DatePicker`` wraps the
same functions for hosts that want a stateful model object.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from ..core import calendar_math
from ..core.focus import Action, Focus, Intent, advance, focus_target, resolve, retreat
from ..core.grid import WeekGrid, build_grid
from ..core.range_policy import RangeBound, RangeRejection, check
from ..display.console_renderer import render

if TYPE_CHECKING:
    from ..config.settings import PickerOptions
    from ..display.styles import Styles

logger = logging.getLogger(__name__)


class Effect(Enum):
    """Follow-up effect the host should act on after an update."""

    QUIT = "quit"
    DATE_CHANGED = "date_changed"
    FOCUS_CHANGED = "focus_changed"


@dataclass(frozen=True)
class PickerState:
    """Complete, immutable state of a date picker."""

    time: date
    selected: bool = False
    focus: Focus = Focus.CALENDAR
    bounds: RangeBound = field(default_factory=RangeBound)

    @property
    def day(self) -> date:
        return calendar_math.normalize(self.time)


@dataclass(frozen=True)
class Update:
    """Result of applying one intent."""

    state: PickerState
    previous_time: date
    rejection: Optional[RangeRejection] = None
    effect: Optional[Effect] = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None

    @property
    def date_changed(self) -> bool:
        return self.effect == Effect.DATE_CHANGED

    @property
    def quit(self) -> bool:
        return self.effect == Effect.QUIT


_STEPS: Dict[Action, Callable[[date], date]] = {
    Action.PREV_DAY: lambda t: calendar_math.add_days(t, -1),
    Action.NEXT_DAY: lambda t: calendar_math.add_days(t, 1),
    Action.PREV_WEEK: lambda t: calendar_math.add_weeks(t, -1),
    Action.NEXT_WEEK: lambda t: calendar_math.add_weeks(t, 1),
    Action.PREV_MONTH: lambda t: calendar_math.add_months(t, -1),
    Action.NEXT_MONTH: lambda t: calendar_math.add_months(t, 1),
    Action.PREV_YEAR: lambda t: calendar_math.add_years(t, -1),
    Action.NEXT_YEAR: lambda t: calendar_math.add_years(t, 1),
}


def _unchanged(state: PickerState, effect: Optional[Effect] = None) -> Update:
    return Update(state=state, previous_time=state.time, effect=effect)


def _step(state: PickerState, action: Action) -> Update:
    try:
        candidate = _STEPS[action](state.time)
    except OverflowError:
        logger.warning(f"Cannot {action.value} from {state.day}: outside supported calendar")
        return _unchanged(state)

    rejection = check(candidate, state.bounds)
    if rejection is not None:
        return Update(state=state, previous_time=state.time, rejection=rejection)

    return Update(
        state=replace(state, time=candidate),
        previous_time=state.time,
        effect=Effect.DATE_CHANGED,
    )


def apply(state: PickerState, intent: Intent) -> Update:
    """Apply a single intent to ``state``.

    Date-changing intents are checked against the state's bounds on
    normalized dates. An out-of-range step leaves the state untouched and
    returns a rejection carrying the bounds; nothing else is modified.

    Args:
        state: Current picker state
        intent: Pre-classified user intent

    Returns:
        Update with the next state and any rejection or effect
    """
    action = resolve(state.focus, intent)

    if action == Action.QUIT:
        return _unchanged(state, Effect.QUIT)
    if action.changes_focus:
        return _unchanged(replace(state, focus=focus_target(action)), Effect.FOCUS_CHANGED)
    if action.changes_date:
        return _step(state, action)
    return _unchanged(state)


def set_focus(state: PickerState, focus: Focus) -> PickerState:
    return replace(state, focus=focus)


def blur(state: PickerState) -> PickerState:
    return replace(state, focus=Focus.NONE)


def set_time(state: PickerState, time: date) -> PickerState:
    """Replace the reference date. Bounds are not enforced for direct sets."""
    return replace(state, time=time)


def select_date(state: PickerState) -> PickerState:
    return replace(state, selected=True)


def unselect_date(state: PickerState) -> PickerState:
    return replace(state, selected=False)


class DatePicker:
    """Stateful date picker model driven by intents."""

    def __init__(
        self,
        time: date,
        start: Optional[date] = None,
        end: Optional[date] = None,
        focus: Focus = Focus.CALENDAR,
        selected: bool = False,
        styles: Optional["Styles"] = None,
    ) -> None:
        """Initialize the date picker.

        Args:
            time: Reference date the calendar is centred on
            start: Optional inclusive lower bound
            end: Optional inclusive upper bound
            focus: Initial focus, defaults to the calendar grid
            selected: Whether ``time`` starts out as a committed selection
            styles: Rendering styles, defaults to ``Styles()``
        """
        bounds = RangeBound(start=start, end=end)
        if bounds.is_inverted:
            logger.warning(f"Range start is after range end ({bounds.describe()}); no date is admissible")

        self._state = PickerState(time=time, selected=selected, focus=focus, bounds=bounds)
        self._styles = styles
        self._change_callbacks: List[Callable[[date], None]] = []

        logger.debug(f"Date picker initialized: {self._state}")

    @classmethod
    def from_options(cls, options: "PickerOptions", styles: Optional["Styles"] = None) -> "DatePicker":
        return cls(
            time=options.time,
            start=options.start,
            end=options.end,
            focus=options.focus,
            selected=options.selected,
            styles=styles,
        )

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def time(self) -> date:
        return self._state.time

    @property
    def selected(self) -> bool:
        return self._state.selected

    @property
    def focused(self) -> Focus:
        return self._state.focus

    @property
    def bounds(self) -> RangeBound:
        return self._state.bounds

    def update(self, intent: Intent) -> Update:
        """Apply ``intent`` and keep the resulting state.

        Returns:
            The Update produced by ``apply``
        """
        result = apply(self._state, intent)
        self._state = result.state

        if result.rejected and result.rejection is not None:
            logger.info(f"Navigation rejected: {result.rejection.message}")
        elif result.date_changed:
            logger.verbose(f"Navigated {intent.value}: {result.previous_time} -> {self._state.time}")  # type: ignore[attr-defined]
            self._notify_change()
        elif result.effect == Effect.FOCUS_CHANGED:
            logger.verbose(f"Focus moved to {self._state.focus.value}")  # type: ignore[attr-defined]

        return result

    def set_focus(self, focus: Focus) -> None:
        self._state = set_focus(self._state, focus)

    def blur(self) -> None:
        self._state = blur(self._state)

    def focus_next(self) -> None:
        self._state = set_focus(self._state, advance(self._state.focus))

    def focus_prev(self) -> None:
        self._state = set_focus(self._state, retreat(self._state.focus))

    def set_time(self, time: date) -> None:
        """Jump to ``time`` without range checks."""
        old = self._state.time
        self._state = set_time(self._state, time)
        logger.debug(f"Time set: {old} -> {time}")
        if old != time:
            self._notify_change()

    def select_date(self) -> None:
        self._state = select_date(self._state)

    def unselect_date(self) -> None:
        self._state = unselect_date(self._state)

    def grid(self) -> WeekGrid:
        state = self._state
        return build_grid(state.time, state.selected, state.focus, state.bounds)

    def view(self) -> str:
        """Render the picker as a text block."""
        return render(self._state, self._styles)

    def add_change_callback(self, callback: Callable[[date], None]) -> None:
        """Add a callback to be called when the reference date changes.

        Args:
            callback: Function to call with the new date
        """
        self._change_callbacks.append(callback)
        logger.debug("Added date change callback")

    def remove_change_callback(self, callback: Callable[[date], None]) -> None:
        if callback in self._change_callbacks:
            self._change_callbacks.remove(callback)
            logger.debug("Removed date change callback")

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            try:
                callback(self._state.time)
            except Exception as e:
                logger.error(f"Error in date change callback: {e}")

    def __repr__(self) -> str:
        state = self._state
        return (
            f"DatePicker(time={state.time!r}, selected={state.selected}, "
            f"focus={state.focus.value}, bounds={state.bounds.describe()})"
        )
