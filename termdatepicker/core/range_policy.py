"""Inclusive date range policy for navigation and cell disabling."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .calendar_math import normalize

logger = logging.getLogger(__name__)

SIDE_START = "start"
SIDE_END = "end"


@dataclass(frozen=True)
class RangeBound:
    """Optional inclusive bounds; an absent side imposes no constraint.

    Start <= End is the caller's responsibility. Each side is applied
    independently, so an inverted bound simply admits no dates.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_inverted(self) -> bool:
        """Check whether both sides are set with start after end."""
        if self.start is None or self.end is None:
            return False
        return normalize(self.start) > normalize(self.end)

    def describe(self) -> str:
        """Human-readable form of the bound, e.g. ``2023-02-02 .. 2023-02-10``."""
        start = normalize(self.start).isoformat() if self.start is not None else "any"
        end = normalize(self.end).isoformat() if self.end is not None else "any"
        return f"{start} .. {end}"


@dataclass(frozen=True)
class RangeRejection:
    """One-shot signal that a navigation step would have left the range."""

    bounds: RangeBound
    candidate: date
    side: str

    @property
    def message(self) -> str:
        if self.side == SIDE_START and self.bounds.start is not None:
            return f"Date must be on or after {normalize(self.bounds.start).isoformat()}"
        if self.side == SIDE_END and self.bounds.end is not None:
            return f"Date must be on or before {normalize(self.bounds.end).isoformat()}"
        return f"Date must be within {self.bounds.describe()}"

    def __str__(self) -> str:
        return self.message


def violated_side(value: date, bounds: Optional[RangeBound]) -> Optional[str]:
    """Return which side of ``bounds`` rejects ``value``, or None if admissible."""
    if bounds is None:
        return None
    day = normalize(value)
    if bounds.start is not None and day < normalize(bounds.start):
        return SIDE_START
    if bounds.end is not None and day > normalize(bounds.end):
        return SIDE_END
    return None


def in_bounds(value: date, bounds: Optional[RangeBound]) -> bool:
    """Check whether ``value`` lies within the inclusive ``bounds``."""
    return violated_side(value, bounds) is None


def check(candidate: date, bounds: Optional[RangeBound]) -> Optional[RangeRejection]:
    """Validate a navigation candidate against ``bounds``.

    Args:
        candidate: Date the navigation step would move to
        bounds: Range to enforce, None for no constraint

    Returns:
        None when the candidate is admissible, otherwise a RangeRejection
        carrying the bounds so the host can present feedback
    """
    side = violated_side(candidate, bounds)
    if side is None or bounds is None:
        return None
    logger.debug(f"Rejected {normalize(candidate)}: outside {bounds.describe()} ({side})")
    return RangeRejection(bounds=bounds, candidate=normalize(candidate), side=side)
