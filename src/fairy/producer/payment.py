"""Payment card and bank account numbers.

Card numbers start with one of the issuer prefixes listed under
``payment.card_vendors`` in the data store and end with a Luhn check digit.
IBANs are assembled from the locale's country code and BBAN template and carry
ISO 7064 mod-97 check digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from stdnum import iban, luhn
from stdnum.iso7064 import mod_97_10

from fairy.data import DataMaster
from fairy.data.keys import PaymentKeys
from fairy.utils.errors import DataKeyError, InvalidArgumentError

from .base import BaseProducer
from .date import DateProducer

__all__ = [
    "CreditCard",
    "CreditCardProducer",
    "luhn_complete",
    "luhn_valid",
    "iban_check_digits",
    "iban_valid",
]


# ---------------------------------------------------------------------------
# Checksums


def luhn_complete(prefix: str) -> str:
    """Append the Luhn check digit to ``prefix``."""

    return prefix + luhn.calc_check_digit(prefix)


def luhn_valid(num: str) -> bool:
    return num.isdigit() and luhn.is_valid(num)


def iban_check_digits(country: str, bban: str) -> str:
    """Compute mod-97 check digits for ``country`` and ``bban``."""

    return iban.calc_check_digits(country + "00" + bban)


def iban_valid(value: str) -> bool:
    """Check the mod-97 checksum only; national BBAN rules are not applied."""

    clean = value.replace(" ", "").upper()
    if len(clean) < 5 or not clean.isalnum():
        return False
    return mod_97_10.is_valid(clean[4:] + clean[:4])


# ---------------------------------------------------------------------------
# Entities


def _group(number: str, sizes: tuple[int, ...]) -> str:
    parts: list[str] = []
    pos = 0
    for size in sizes:
        if pos >= len(number):
            break
        parts.append(number[pos : pos + size])
        pos += size
    if pos < len(number):
        parts.append(number[pos:])
    return " ".join(parts)


@dataclass(slots=True, frozen=True)
class CreditCard:
    """A generated payment card."""

    vendor: str
    number: str
    expiry_date: date

    @property
    def _groups(self) -> tuple[int, ...]:
        if len(self.number) == 15:
            return (4, 6, 5)
        return (4,) * (len(self.number) // 4)

    @property
    def formatted(self) -> str:
        """Card number split into the usual digit groups."""

        return _group(self.number, self._groups)

    @property
    def masked(self) -> str:
        """Display form keeping only the last four digits visible."""

        hidden = "*" * (len(self.number) - 4) + self.number[-4:]
        return _group(hidden, self._groups)

    @property
    def expiry(self) -> str:
        return f"{self.expiry_date.month:02d}/{self.expiry_date.year % 100:02d}"


# ---------------------------------------------------------------------------
# Producer


class CreditCardProducer:
    """Produce Luhn-valid card numbers and IBANs."""

    def __init__(self, data: DataMaster, base: BaseProducer, dates: DateProducer) -> None:
        self.data = data
        self.base = base
        self.dates = dates

    def vendors(self) -> list[str]:
        return list(self.data.get_mapping(PaymentKeys.CARD_VENDORS))

    def _vendor_spec(self, vendor: str | None) -> tuple[str, dict[str, object]]:
        table = self.data.get_mapping(PaymentKeys.CARD_VENDORS)
        if vendor is None:
            weights = {name: float(spec.get("weight", 1)) for name, spec in table.items()}
            vendor = self.base.weighted_key(weights)
        else:
            lookup = {name.upper(): name for name in self.vendors()}
            if vendor.upper() not in lookup:
                raise InvalidArgumentError(
                    f"unknown card vendor {vendor!r}; expected one of {sorted(lookup.values())}"
                )
            vendor = lookup[vendor.upper()]
        return vendor, dict(table[vendor])

    def number(self, vendor: str | None = None) -> tuple[str, str]:
        """Return ``(vendor, number)`` for a new card number."""

        name, spec = self._vendor_spec(vendor)
        prefixes = spec.get("prefixes")
        lengths = spec.get("lengths")
        if not prefixes or not lengths:
            raise DataKeyError(f"card vendor {name!r} needs prefixes and lengths")
        prefix = str(self.base.random_element(prefixes))  # type: ignore[arg-type]
        length = int(self.base.random_element(lengths))  # type: ignore[arg-type]
        if length <= len(prefix):
            raise DataKeyError(f"card vendor {name!r} length {length} is too short")
        body = self.base.random_digits(length - len(prefix) - 1)
        return name, luhn_complete(prefix + body)

    def expiry_date(self) -> date:
        """Return the first day of a month between next month and the validity horizon."""

        years = int(self.data.get_number(PaymentKeys.CARD_VALIDITY_YEARS, 5))
        today = self.dates.now().date()
        offset = self.base.random_between(1, max(1, years * 12))
        month_index = today.year * 12 + (today.month - 1) + offset
        return date(month_index // 12, month_index % 12 + 1, 1)

    def produce(self, vendor: str | None = None) -> CreditCard:
        name, number = self.number(vendor)
        return CreditCard(vendor=name, number=number, expiry_date=self.expiry_date())

    def iban(self) -> str:
        """Return an IBAN for the locale's country in groups of four."""

        country = self.data.get_string(PaymentKeys.IBAN_COUNTRY_CODE).upper()
        bank = self.base.random_element(self.data.get_string_list(PaymentKeys.IBAN_BANK_CODES))
        pattern = self.data.get_string(PaymentKeys.IBAN_BBAN_FORMAT)
        bban = self.base.templatify(pattern, {"bank": bank}).upper()
        iban = country + iban_check_digits(country, bban) + bban
        return _group(iban, (4,) * (len(iban) // 4))
