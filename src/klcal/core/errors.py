# src/klcal/core/errors.py
from __future__ import annotations


class LunarCalendarError(ValueError):
    """
    Base class of every rejection raised by klcal.

    Subclasses ValueError so callers that only care about "bad input" can
    catch the builtin.
    """


class OutOfRangeYear(LunarCalendarError):
    pass


class OutOfRangeMonth(LunarCalendarError):
    pass


class OutOfRangeDay(LunarCalendarError):
    pass


class MalformedReferenceSymbol(LunarCalendarError):
    """A ganji label or reference-data field that cannot be parsed."""
