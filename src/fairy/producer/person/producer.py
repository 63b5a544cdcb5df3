"""Compose people and addresses from the locale data store.

First names depend on the sampled sex.  Last names may be a plain list or,
for languages with gendered surnames, a mapping with ``male`` and ``female``
lists.  Usernames and e-mail addresses are derived from the chosen names so
that they always agree with them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields, replace

from fairy.data import DataMaster
from fairy.data.keys import AddressKeys, PersonKeys
from fairy.utils.errors import DataKeyError, InvalidArgumentError

from ..base import BaseProducer
from ..company import CompanyProducer
from ..date import DEFAULT_MAX_AGE, DEFAULT_MIN_AGE, DateProducer
from ..net import ascii_slug
from .models import Address, Person, Sex
from .properties import PersonProperties

__all__ = ["AddressProducer", "PersonProducer"]


class AddressProducer:
    def __init__(self, data: DataMaster, base: BaseProducer) -> None:
        self.data = data
        self.base = base

    def produce(self) -> Address:
        street = self.base.random_element(self.data.get_string_list(AddressKeys.STREETS))
        number = str(
            self.base.random_between(1, int(self.data.get_number(AddressKeys.STREET_NUMBER_MAX)))
        )
        apartment: str | None = None
        if self.base.true_or_false(self.data.get_number(AddressKeys.APARTMENT_PROBABILITY, 0.0)):
            apartment = str(
                self.base.random_between(
                    1, int(self.data.get_number(AddressKeys.APARTMENT_NUMBER_MAX))
                )
            )
        postal_code = self.base.templatify(self.data.get_string(AddressKeys.POSTAL_CODE_FORMAT))
        city = self.base.random_element(self.data.get_string_list(AddressKeys.CITIES))

        apartment_text = ""
        if apartment is not None:
            apartment_text = self.base.templatify(
                self.data.get_string(AddressKeys.APARTMENT_FORMAT), {"apartment": apartment}
            )
        line1 = self.base.templatify(
            self.data.get_string(AddressKeys.LINE1_FORMAT),
            {"street": street, "number": number, "apartment": apartment_text},
        )
        line2 = self.base.templatify(
            self.data.get_string(AddressKeys.LINE2_FORMAT),
            {"postal_code": postal_code, "city": city},
        )
        return Address(
            street=street,
            street_number=number,
            apartment_number=apartment,
            postal_code=postal_code,
            city=city,
            line1=line1,
            line2=line2,
        )


class PersonProducer:
    """Produce :class:`Person` entities honouring :class:`PersonProperties` overrides."""

    def __init__(
        self,
        data: DataMaster,
        base: BaseProducer,
        dates: DateProducer,
        addresses: AddressProducer,
        companies: CompanyProducer,
        *,
        min_age: int = DEFAULT_MIN_AGE,
        max_age: int = DEFAULT_MAX_AGE,
    ) -> None:
        self.data = data
        self.base = base
        self.dates = dates
        self.addresses = addresses
        self.companies = companies
        self.min_age = min_age
        self.max_age = max_age

    # -- Names ------------------------------------------------------------

    def sex(self) -> Sex:
        weights = self.data.get_mapping(PersonKeys.SEX_WEIGHTS)
        try:
            table = {Sex(key): float(weight) for key, weight in weights.items()}
        except ValueError as exc:
            raise DataKeyError(f"invalid {PersonKeys.SEX_WEIGHTS}: {exc}") from exc
        return self.base.weighted_key(table)

    def first_names(self, sex: Sex) -> Sequence[str]:
        key = PersonKeys.MALE_FIRST_NAMES if sex is Sex.MALE else PersonKeys.FEMALE_FIRST_NAMES
        return self.data.get_string_list(key)

    def last_names(self, sex: Sex) -> Sequence[str]:
        value = self.data.get_value(PersonKeys.LAST_NAMES)
        if isinstance(value, tuple):
            return self.data.get_string_list(PersonKeys.LAST_NAMES)
        return self.data.get_string_list(f"{PersonKeys.LAST_NAMES}.{sex.value}")

    def middle_name(self, sex: Sex, first_name: str) -> str | None:
        probability = self.data.get_number(PersonKeys.MIDDLE_NAME_PROBABILITY, 0.0)
        if not self.base.true_or_false(probability):
            return None
        candidates = [n for n in self.first_names(sex) if n != first_name]
        if not candidates:
            return None
        return self.base.random_element(candidates)

    # -- Production -------------------------------------------------------

    def _age_range(self, props: PersonProperties) -> tuple[int, int]:
        min_age = self.min_age if props.min_age is None else props.min_age
        max_age = self.max_age if props.max_age is None else props.max_age
        if min_age > max_age:
            raise InvalidArgumentError(f"min_age {min_age} exceeds max_age {max_age}")
        return min_age, max_age

    def produce(self, props: PersonProperties | None = None, **overrides: object) -> Person:
        """Return a new person.

        Overrides may be given as a :class:`PersonProperties` instance, as
        keyword arguments (``sex="female"``, ``min_age=30``) or both, keywords
        taking precedence.
        """

        props = props or PersonProperties()
        if overrides:
            unknown = set(overrides) - {f.name for f in fields(PersonProperties)}
            if unknown:
                raise InvalidArgumentError(f"unknown person properties: {sorted(unknown)}")
            props = replace(props, **overrides)  # type: ignore[arg-type]

        min_age, max_age = self._age_range(props)

        sex = props.sex if isinstance(props.sex, Sex) else self.sex()
        first_name = props.first_name or self.base.random_element(self.first_names(sex))
        middle_name = self.middle_name(sex, first_name)
        last_name = props.last_name or self.base.random_element(self.last_names(sex))

        date_of_birth = self.dates.random_date_of_birth(min_age, max_age)
        age = self.dates.age_on(date_of_birth)

        first_slug = ascii_slug(first_name) or "user"
        last_slug = ascii_slug(last_name) or "user"
        username = f"{first_slug[0]}{last_slug}{date_of_birth.year % 100:02d}"
        free_domain = self.base.random_element(
            self.data.get_string_list(PersonKeys.FREE_EMAIL_DOMAINS)
        )
        email = f"{first_slug}.{last_slug}@{free_domain}"

        password = self.base.random_string(
            int(self.data.get_number(PersonKeys.PASSWORD_LENGTH, 10))
        )
        telephone = self.base.numerify(
            self.base.weighted_key(self.data.get_mapping(PersonKeys.TELEPHONE_FORMATS))
        )
        address = self.addresses.produce()
        company = props.company or self.companies.produce()
        passport = self.base.templatify(self.data.get_string(PersonKeys.PASSPORT_FORMAT)).upper()

        return Person(
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            sex=sex,
            date_of_birth=date_of_birth,
            age=age,
            username=username,
            email=email,
            password=password,
            telephone_number=telephone,
            address=address,
            company=company,
            company_email=f"{first_slug}.{last_slug}@{company.domain}",
            passport_number=passport,
        )
