"""Caller supplied overrides for :class:`~fairy.producer.person.PersonProducer`.

Any field left as ``None`` is chosen at random; a set field always wins over
random selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from fairy.utils.errors import InvalidArgumentError

from ..company import Company
from .models import Sex


@dataclass(slots=True, frozen=True)
class PersonProperties:
    sex: Sex | str | None = None
    min_age: int | None = None
    max_age: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: Company | None = None

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if isinstance(self.sex, str):
            try:
                object.__setattr__(self, "sex", Sex(self.sex.strip().lower()))
            except ValueError:
                raise InvalidArgumentError(
                    f"unknown sex {self.sex!r}; expected one of {[s.value for s in Sex]}"
                ) from None
        for name in ("min_age", "max_age"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidArgumentError(f"{name} must not be negative")
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            raise InvalidArgumentError(
                f"min_age {self.min_age} exceeds max_age {self.max_age}"
            )
        for name in ("first_name", "last_name"):
            value = getattr(self, name)
            if value is not None and not value.strip():
                raise InvalidArgumentError(f"{name} must not be blank")

    @classmethod
    def male(cls) -> "PersonProperties":
        return cls(sex=Sex.MALE)

    @classmethod
    def female(cls) -> "PersonProperties":
        return cls(sex=Sex.FEMALE)

    @classmethod
    def age_between(cls, min_age: int, max_age: int) -> "PersonProperties":
        return cls(min_age=min_age, max_age=max_age)
