"""Day window: a 24h interval that starts at a fixed local hour instead of midnight."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from ..errors import InvalidDateError

DEFAULT_BOUNDARY_HOUR = 5
DATE_FORMAT = "%Y%m%d"


@dataclass(frozen=True, slots=True)
class DayWindow:
    """Half-open interval ``[start, end)`` of timezone-aware datetimes."""

    start: datetime
    end: datetime

    @classmethod
    def for_date(cls, day: date, tz: tzinfo, boundary_hour: int = DEFAULT_BOUNDARY_HOUR) -> DayWindow:
        start = datetime.combine(day, time(hour=boundary_hour), tzinfo=tz)
        return cls(start=start, end=start + timedelta(days=1))

    @classmethod
    def current(
        cls,
        tz: tzinfo,
        boundary_hour: int = DEFAULT_BOUNDARY_HOUR,
        now: Optional[datetime] = None,
    ) -> DayWindow:
        """Window containing ``now``: before the boundary hour, that is yesterday's window."""
        local_now = (now or datetime.now(tz)).astimezone(tz)
        day = local_now.date()
        if local_now.hour < boundary_hour:
            day -= timedelta(days=1)
        return cls.for_date(day, tz, boundary_hour)

    @classmethod
    def parse(cls, raw: str, tz: tzinfo, boundary_hour: int = DEFAULT_BOUNDARY_HOUR) -> DayWindow:
        """Window for an explicit ``YYYYMMDD`` date.

        Raises:
            InvalidDateError: not exactly 8 digits, or not a real calendar date.
        """
        text = (raw or "").strip()
        if len(text) != 8 or not text.isdigit():
            raise InvalidDateError(raw)
        try:
            day = datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDateError(raw, str(e)) from e
        return cls.for_date(day, tz, boundary_hour)

    @property
    def start_epoch(self) -> int:
        return int(self.start.timestamp())

    @property
    def end_epoch(self) -> int:
        return int(self.end.timestamp())

    def contains_epoch(self, seconds: int) -> bool:
        """True when ``start <= seconds < end``."""
        return self.start_epoch <= seconds < self.end_epoch

    def label(self) -> str:
        """E.g. ``2024/01/01 05:00 ~ 2024/01/02 05:00``."""
        fmt = "%Y/%m/%d %H:%M"
        return f"{self.start.strftime(fmt)} ~ {self.end.strftime(fmt)}"
