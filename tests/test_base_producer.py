from __future__ import annotations

import random
import re

import pytest

from fairy.producer.base import BaseProducer
from fairy.utils.errors import InvalidArgumentError


@pytest.fixture
def base() -> BaseProducer:
    return BaseProducer(random.Random(7))


def test_random_between_inclusive(base: BaseProducer) -> None:
    values = {base.random_between(1, 3) for _ in range(500)}
    assert values == {1, 2, 3}
    assert base.random_between(5, 5) == 5
    with pytest.raises(InvalidArgumentError):
        base.random_between(4, 3)


def test_random_element(base: BaseProducer) -> None:
    options = ("a", "b", "c")
    assert all(base.random_element(options) in options for _ in range(50))
    with pytest.raises(InvalidArgumentError):
        base.random_element([])
    assert len(base.random_elements(options, 4)) == 4
    with pytest.raises(InvalidArgumentError):
        base.random_elements(options, -1)


def test_weighted_element(base: BaseProducer) -> None:
    assert {base.weighted_element(["x", "y"], [0, 1]) for _ in range(50)} == {"y"}
    assert base.weighted_key({"only": 3}) == "only"
    with pytest.raises(InvalidArgumentError):
        base.weighted_element([], [])
    with pytest.raises(InvalidArgumentError):
        base.weighted_element(["x"], [1, 2])
    with pytest.raises(InvalidArgumentError):
        base.weighted_element(["x", "y"], [1, -1])
    with pytest.raises(InvalidArgumentError):
        base.weighted_element(["x", "y"], [0, 0])


def test_weighted_element_follows_weights(base: BaseProducer) -> None:
    picks = [base.weighted_element(["rare", "common"], [1, 9]) for _ in range(2000)]
    assert picks.count("common") > picks.count("rare") * 3


def test_digits_and_strings(base: BaseProducer) -> None:
    assert re.fullmatch(r"\d{12}", base.random_digits(12))
    assert base.random_digits(0) == ""
    assert re.fullmatch(r"[0-9a-f]{6}", base.random_hex(6))
    assert len(base.random_string(9)) == 9
    assert set(base.random_string(30, "xy")) <= {"x", "y"}
    with pytest.raises(InvalidArgumentError):
        base.random_digits(-1)
    with pytest.raises(InvalidArgumentError):
        base.random_string(3, "")


def test_true_or_false(base: BaseProducer) -> None:
    assert not any(base.true_or_false(0.0) for _ in range(50))
    assert all(base.true_or_false(1.0) for _ in range(50))
    with pytest.raises(InvalidArgumentError):
        base.true_or_false(1.5)


def test_numerify_letterify(base: BaseProducer) -> None:
    assert re.fullmatch(r"\d{3}-\d{3}", base.numerify("###-###"))
    assert re.fullmatch(r"[a-z]{2}#", base.letterify("??#"))
    assert re.fullmatch(r"[a-z]\d", base.bothify("?#"))


def test_templatify(base: BaseProducer) -> None:
    out = base.templatify("{bank}-##-??", {"bank": "#B?"})
    assert re.fullmatch(r"#B\?-\d{2}-[a-z]{2}", out)
    assert base.templatify("plain text") == "plain text"
    with pytest.raises(InvalidArgumentError):
        base.templatify("{missing}")


def test_same_seed_same_sequence() -> None:
    a = BaseProducer(random.Random(3))
    b = BaseProducer(random.Random(3))
    seq_a = [a.templatify("{x}##?", {"x": "k"}), a.random_between(0, 99), a.random_hex(4)]
    seq_b = [b.templatify("{x}##?", {"x": "k"}), b.random_between(0, 99), b.random_hex(4)]
    assert seq_a == seq_b
