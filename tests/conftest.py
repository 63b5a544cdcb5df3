from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from fairy import Fairy

FIXED_NOW = datetime(2024, 6, 15, 12, 30, 0)


def _fixed_clock() -> datetime:
    return FIXED_NOW


def _build(locale: str = "en", seed: int | str = 42) -> Fairy:
    return (
        Fairy.builder()
        .with_locale(locale)
        .with_random_seed(seed)
        .with_clock(_fixed_clock)
        .build()
    )


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return _fixed_clock


@pytest.fixture
def make_fairy() -> Callable[..., Fairy]:
    """Factory for seeded instances with a fixed clock."""
    return _build


@pytest.fixture
def fairy_en() -> Fairy:
    return _build("en")


@pytest.fixture
def fairy_pl() -> Fairy:
    return _build("pl")
