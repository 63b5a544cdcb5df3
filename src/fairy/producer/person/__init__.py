"""Person generation: entities, override properties and producers."""

from .models import Address, Person, Sex
from .producer import AddressProducer, PersonProducer
from .properties import PersonProperties

__all__ = [
    "Address",
    "AddressProducer",
    "Person",
    "PersonProducer",
    "PersonProperties",
    "Sex",
]
