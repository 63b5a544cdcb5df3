from __future__ import annotations

import re
from pathlib import Path

import pytest

from fairy import Fairy
from fairy.data.keys import NetKeys
from fairy.producer.net import ascii_slug
from fairy.utils.errors import DataKeyError


def test_ascii_slug() -> None:
    assert ascii_slug("Łukasz Wiśniewski") == "lukaszwisniewski"
    assert ascii_slug("Lumière Étoile", "-") == "lumiere-etoile"
    assert ascii_slug("  A & B  ", "-") == "a-b"


def test_ipv4(fairy_en: Fairy) -> None:
    for _ in range(100):
        octets = [int(o) for o in fairy_en.network().ipv4().split(".")]
        assert len(octets) == 4
        assert 1 <= octets[0] <= 254
        assert all(0 <= o <= 255 for o in octets)


def test_ipv6(fairy_en: Fairy) -> None:
    for _ in range(50):
        assert re.fullmatch(r"(?:[0-9a-f]{4}:){7}[0-9a-f]{4}", fairy_en.network().ipv6())


def test_mac_address(fairy_en: Fairy) -> None:
    for _ in range(50):
        mac = fairy_en.network().mac_address()
        assert re.fullmatch(r"(?:[0-9a-f]{2}:){5}[0-9a-f]{2}", mac)
        first = int(mac[:2], 16)
        assert first & 0b01 == 0
        assert first & 0b10 == 0b10
    assert "-" in fairy_en.network().mac_address(sep="-")


def test_domain(fairy_en: Fairy) -> None:
    suffixes = fairy_en.data_master.get_string_list(NetKeys.DOMAIN_SUFFIXES)
    for _ in range(50):
        domain = fairy_en.network().domain()
        label, _, suffix = domain.partition(".")
        assert suffix in suffixes
        assert re.fullmatch(r"[a-z0-9]+", label)
    assert fairy_en.network().domain("Acme Widgets").startswith("acme-widgets.")


def test_url(fairy_en: Fairy) -> None:
    for _ in range(50):
        assert fairy_en.network().url().startswith("http://")
        assert fairy_en.network().url(https=True).startswith("https://")
        assert "{" not in fairy_en.network().url()


def test_domain_for_name_without_ascii_letters(fairy_en: Fairy) -> None:
    words = {ascii_slug(w) for w in fairy_en.data_master.get_string_list(NetKeys.DOMAIN_WORDS)}
    for name in ("Газпром", "東京", "***"):
        label, _, suffix = fairy_en.network().domain(name).partition(".")
        assert label in words
        assert suffix


def test_domain_words_must_survive_slugging(tmp_path: Path) -> None:
    (tmp_path / "fairy_ru.yml").write_text("net:\n  domain_words: [сеть, мир]\n", encoding="utf-8")
    fairy = Fairy.builder().with_locale("ru").with_search_path([tmp_path]).build()
    with pytest.raises(DataKeyError):
        fairy.network().domain()
