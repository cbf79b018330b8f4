"""Injectable wall clock."""

from datetime import datetime, timedelta


class Clock:
    """Source of the current local time.

    Services take a Clock instead of calling ``datetime.now()`` so that edit
    windows and report periods can be tested deterministically.
    """

    def now(self) -> datetime:
        """Return the current local wall-clock time."""
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given instant that can be moved by hand."""

    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        """Move the clock forward by a ``timedelta(**kwargs)``."""
        self.current = self.current + timedelta(**kwargs)


system_clock = Clock()
