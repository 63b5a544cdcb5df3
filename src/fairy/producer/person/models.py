"""Immutable value objects describing generated people."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..company import Company


class Sex(Enum):
    """Enumeration of supported sexes; values match ``person.sex_weights`` keys."""

    MALE = "male"
    FEMALE = "female"


@dataclass(slots=True, frozen=True)
class Address:
    """Postal address.  ``line1``/``line2`` are rendered with the locale's formats."""

    street: str
    street_number: str
    apartment_number: str | None
    postal_code: str
    city: str
    line1: str
    line2: str

    def __str__(self) -> str:
        return f"{self.line1}\n{self.line2}"


@dataclass(slots=True, frozen=True)
class Person:
    """A generated person."""

    first_name: str
    middle_name: str | None
    last_name: str
    sex: Sex
    date_of_birth: date
    age: int
    username: str
    email: str
    password: str
    telephone_number: str
    address: Address
    company: Company
    company_email: str
    passport_number: str

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def is_male(self) -> bool:
        return self.sex is Sex.MALE

    @property
    def is_female(self) -> bool:
        return self.sex is Sex.FEMALE
