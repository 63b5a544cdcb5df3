"""The :class:`Fairy` facade.

A :class:`Fairy` loads ``<prefix>.yml`` and ``<prefix>_<language>.yml`` once at
construction and then hands out producers that share the resulting read-only
data store and a single random generator.

Using :meth:`Fairy.builder`, the following fields can be configured:

``locale``
    Selects the locale data file (``"pl"`` loads ``fairy_pl.yml``).
``file_prefix``
    Data file prefix; ``"custom"`` with English loads ``custom.yml`` and
    ``custom_en.yml``.
``search_path``
    Extra directories searched after the bundled resources.
``random`` / ``random_seed``
    The generator to use, or a seed making output **deterministic**, e.g. to
    always map the same test ID to the same fake name.  Only the last one set
    takes effect.
``clock``
    Callable returning "now" for date based values.

Construction is not thread-safe.  Afterwards the data store never changes;
the generator is the only mutable state, so threads should either lock around
calls or use :meth:`Fairy.fork` to obtain their own instance.
"""

from __future__ import annotations

import os
import random
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import ConfigModel
from .data import DataMaster
from .producer.base import BaseProducer
from .producer.company import Company, CompanyProducer
from .producer.date import Clock, DateProducer
from .producer.net import NetworkProducer
from .producer.payment import CreditCardProducer
from .producer.person import AddressProducer, Person, PersonProducer, PersonProperties
from .producer.seed import Seed, derive_seed, rng_for
from .producer.text import TextProducer
from .utils.logging import get_logger

__all__ = ["Fairy", "DEFAULT_FILE_PREFIX", "DEFAULT_LOCALE"]

log = get_logger(__name__)

DEFAULT_FILE_PREFIX = "fairy"
DEFAULT_LOCALE = "en"


class Fairy:
    """Entry point producing locale aware synthetic data."""

    class Builder:
        """Configure a :class:`Fairy` field by field; every setter returns the builder."""

        def __init__(self) -> None:
            self._locale = DEFAULT_LOCALE
            self._file_prefix = DEFAULT_FILE_PREFIX
            self._search_path: list[Path] = []
            self._random: random.Random | None = None
            self._clock: Clock = datetime.now
            self._min_age: int | None = None
            self._max_age: int | None = None

        def with_locale(self, locale: str) -> "Fairy.Builder":
            self._locale = locale
            return self

        def with_file_prefix(self, file_prefix: str) -> "Fairy.Builder":
            self._file_prefix = file_prefix
            return self

        def with_search_path(
            self, search_path: Iterable[str | os.PathLike[str]]
        ) -> "Fairy.Builder":
            self._search_path = [Path(p) for p in search_path]
            return self

        def with_random(self, rng: random.Random) -> "Fairy.Builder":
            self._random = rng
            return self

        def with_random_seed(self, seed: Seed) -> "Fairy.Builder":
            self._random = rng_for(seed)
            return self

        def with_clock(self, clock: Clock) -> "Fairy.Builder":
            self._clock = clock
            return self

        def with_age_range(self, min_age: int, max_age: int) -> "Fairy.Builder":
            """Default age range for :meth:`Fairy.person`."""

            self._min_age = min_age
            self._max_age = max_age
            return self

        def build(self) -> "Fairy":
            data = DataMaster.load(self._file_prefix, self._locale, self._search_path)
            return Fairy(
                data,
                self._random if self._random is not None else rng_for(None),
                clock=self._clock,
                min_age=self._min_age,
                max_age=self._max_age,
            )

    def __init__(
        self,
        data: DataMaster,
        rng: random.Random,
        *,
        clock: Clock = datetime.now,
        min_age: int | None = None,
        max_age: int | None = None,
    ) -> None:
        self._data = data
        self._clock = clock
        self._base = BaseProducer(rng)
        self._dates = DateProducer(self._base, clock)
        self._network = NetworkProducer(data, self._base)
        self._companies = CompanyProducer(data, self._base, self._network)
        person_kwargs: dict[str, Any] = {}
        if min_age is not None:
            person_kwargs["min_age"] = min_age
        if max_age is not None:
            person_kwargs["max_age"] = max_age
        self._person_kwargs = person_kwargs
        self._persons = PersonProducer(
            data,
            self._base,
            self._dates,
            AddressProducer(data, self._base),
            self._companies,
            **person_kwargs,
        )
        self._cards = CreditCardProducer(data, self._base, self._dates)
        self._texts: dict[bool, TextProducer] = {}
        log.debug("created %r", self)

    # -- Factories --------------------------------------------------------

    @classmethod
    def builder(cls) -> "Fairy.Builder":
        return cls.Builder()

    @classmethod
    def create(
        cls,
        locale: str = DEFAULT_LOCALE,
        file_prefix: str = DEFAULT_FILE_PREFIX,
    ) -> "Fairy":
        """Create an instance backed by ``<file_prefix>.yml`` and its ``locale`` file."""

        return cls.builder().with_locale(locale).with_file_prefix(file_prefix).build()

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "Fairy":
        """Create an instance from a loaded :class:`~fairy.config.ConfigModel`."""

        builder = (
            cls.builder()
            .with_locale(cfg.locale)
            .with_file_prefix(cfg.data.file_prefix)
            .with_search_path(cfg.data.search_path)
            .with_age_range(cfg.person.min_age, cfg.person.max_age)
        )
        if cfg.random.seed is not None:
            builder.with_random_seed(cfg.random.seed)
        return builder.build()

    def fork(self, seed: Seed, label: str | None = None) -> "Fairy":
        """Return an instance sharing this data store with its own generator.

        With ``label`` the child seed is derived from ``seed`` and ``label`` so
        that several workers can be seeded from one run seed.
        """

        child_seed = seed if label is None else derive_seed(seed, label)
        return Fairy(self._data, rng_for(child_seed), clock=self._clock, **self._person_kwargs)

    # -- Producers --------------------------------------------------------

    @property
    def data_master(self) -> DataMaster:
        return self._data

    def base_producer(self) -> BaseProducer:
        return self._base

    def date_producer(self) -> DateProducer:
        return self._dates

    def text(self, latin: bool = False) -> TextProducer:
        """Return the text producer, in latin mode if ``latin`` is set."""

        if latin not in self._texts:
            self._texts[latin] = TextProducer(self._data, self._base, latin=latin)
        return self._texts[latin]

    def person(self, props: PersonProperties | None = None, **overrides: Any) -> Person:
        """Return a fake person; see :meth:`PersonProducer.produce` for overrides."""

        return self._persons.produce(props, **overrides)

    def company(self) -> Company:
        return self._companies.produce()

    def credit_card(self) -> CreditCardProducer:
        return self._cards

    def network(self) -> NetworkProducer:
        return self._network

    def __repr__(self) -> str:
        return f"Fairy(file_prefix={self._data.file_prefix!r}, locale={self._data.locale!r})"
