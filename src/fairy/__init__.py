"""Locale aware synthetic data for tests and demos.

Create a :class:`Fairy` with :meth:`Fairy.create` or :meth:`Fairy.builder`
and ask it for people, companies, text, dates, payment cards and network
identifiers.  The command line interface lives in :mod:`fairy.cli`.
"""

from .fairy import Fairy
from .producer import (
    Address,
    Company,
    CreditCard,
    Person,
    PersonProperties,
    Sex,
)
from .utils.errors import (
    ConfigurationError,
    DataKeyError,
    DataLoadError,
    DataParseError,
    FairyError,
    InvalidArgumentError,
)

__version__ = "0.1.0"

__all__ = [
    "Address",
    "Company",
    "ConfigurationError",
    "CreditCard",
    "DataKeyError",
    "DataLoadError",
    "DataParseError",
    "Fairy",
    "FairyError",
    "InvalidArgumentError",
    "Person",
    "PersonProperties",
    "Sex",
    "__version__",
]
