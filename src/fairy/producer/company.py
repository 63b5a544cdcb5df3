"""Companies with locale specific legal forms and identifiers."""

from __future__ import annotations

from dataclasses import dataclass

from fairy.data import DataMaster
from fairy.data.keys import CompanyKeys

from .base import BaseProducer
from .net import NetworkProducer, ascii_slug

__all__ = ["Company", "CompanyProducer"]


@dataclass(slots=True, frozen=True)
class Company:
    """A generated company."""

    name: str
    suffix: str
    domain: str
    email: str
    vat_identification_number: str
    registration_number: str

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.suffix}"


class CompanyProducer:
    """Compose company names from one or two fragments plus a legal form suffix."""

    def __init__(self, data: DataMaster, base: BaseProducer, network: NetworkProducer) -> None:
        self.data = data
        self.base = base
        self.network = network

    def name(self) -> str:
        fragments = self.data.get_string_list(CompanyKeys.NAMES)
        first = self.base.random_element(fragments)
        if len(fragments) > 1 and self.base.true_or_false(0.3):
            second = self.base.random_element([f for f in fragments if f != first])
            return f"{first} {second}"
        return first

    def produce(self) -> Company:
        name = self.name()
        suffix = self.base.random_element(self.data.get_string_list(CompanyKeys.SUFFIXES))
        domain = self.network.domain(name)
        local = self.base.random_element(self.data.get_string_list(CompanyKeys.EMAIL_LOCAL_PARTS))
        vat = self.base.templatify(self.data.get_string(CompanyKeys.VAT_FORMAT)).upper()
        registration = self.base.templatify(self.data.get_string(CompanyKeys.REGISTRATION_FORMAT))
        return Company(
            name=name,
            suffix=suffix,
            domain=domain,
            email=f"{ascii_slug(local, '.')}@{domain}",
            vat_identification_number=vat,
            registration_number=registration,
        )
