"""Random dates and timestamps within caller supplied bounds.

Bounds are inclusive and resolved to whole seconds.  The notion of "now" comes
from an injectable clock so that results relative to the present can be made
reproducible.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta

from fairy.utils.errors import InvalidArgumentError

from .base import BaseProducer

__all__ = ["Clock", "DateProducer", "add_years", "years_between"]

Clock = Callable[[], datetime]

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 100


def add_years(d: date, years: int) -> date:
    """Return ``d`` shifted by ``years``; 29 February maps to 28 February."""

    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)


def years_between(start: date, end: date) -> int:
    """Return the number of full years from ``start`` to ``end``."""

    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class DateProducer:
    """Produce random dates relative to explicit bounds or to the clock."""

    def __init__(self, base: BaseProducer, clock: Clock = datetime.now) -> None:
        self.base = base
        self.clock = clock

    def now(self) -> datetime:
        return self.clock().replace(microsecond=0)

    def random_datetime_between(self, start: datetime, end: datetime) -> datetime:
        """Return a timestamp in ``[start, end]`` with second resolution."""

        if start > end:
            raise InvalidArgumentError(f"start {start} is after end {end}")
        span = int((end - start).total_seconds())
        return start + timedelta(seconds=self.base.random_between(0, span))

    def random_date_between(self, start: date, end: date) -> date:
        """Return a date in ``[start, end]``."""

        if start > end:
            raise InvalidArgumentError(f"start {start} is after end {end}")
        return start + timedelta(days=self.base.random_between(0, (end - start).days))

    def random_datetime_in_the_past(self, max_years: int) -> datetime:
        if max_years < 0:
            raise InvalidArgumentError("max_years must not be negative")
        now = self.now()
        earliest = datetime.combine(add_years(now.date(), -max_years), now.time())
        return self.random_datetime_between(earliest, now)

    def random_datetime_in_the_future(self, max_years: int) -> datetime:
        if max_years < 0:
            raise InvalidArgumentError("max_years must not be negative")
        now = self.now()
        latest = datetime.combine(add_years(now.date(), max_years), now.time())
        return self.random_datetime_between(now, latest)

    def random_date_between_years(self, from_year: int, to_year: int) -> date:
        """Return a date from 1 January ``from_year`` to 31 December ``to_year``."""

        if from_year > to_year:
            raise InvalidArgumentError(f"from_year {from_year} is after to_year {to_year}")
        return self.random_date_between(date(from_year, 1, 1), date(to_year, 12, 31))

    def random_date_of_birth(
        self,
        min_age: int = DEFAULT_MIN_AGE,
        max_age: int = DEFAULT_MAX_AGE,
    ) -> date:
        """Return a birth date for someone aged ``min_age`` to ``max_age`` today."""

        if min_age < 0 or max_age < 0:
            raise InvalidArgumentError("ages must not be negative")
        if min_age > max_age:
            raise InvalidArgumentError(f"min_age {min_age} exceeds max_age {max_age}")
        today = self.now().date()
        latest = add_years(today, -min_age)
        earliest = add_years(today, -(max_age + 1)) + timedelta(days=1)
        return self.random_date_between(earliest, latest)

    def age_on(self, birth: date, when: date | None = None) -> int:
        """Return the age in full years of someone born on ``birth``."""

        return years_between(birth, when or self.now().date())
