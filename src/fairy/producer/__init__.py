"""Producers sampling synthetic values from the data store."""

from .base import BaseProducer
from .company import Company, CompanyProducer
from .date import DateProducer
from .net import NetworkProducer
from .payment import CreditCard, CreditCardProducer
from .person import Address, AddressProducer, Person, PersonProducer, PersonProperties, Sex
from .seed import canonicalize_seed, derive_seed, rng_for
from .text import TextProducer

__all__ = [
    "Address",
    "AddressProducer",
    "BaseProducer",
    "Company",
    "CompanyProducer",
    "CreditCard",
    "CreditCardProducer",
    "DateProducer",
    "NetworkProducer",
    "Person",
    "PersonProducer",
    "PersonProperties",
    "Sex",
    "TextProducer",
    "canonicalize_seed",
    "derive_seed",
    "rng_for",
]
