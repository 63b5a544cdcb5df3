from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from fairy import Fairy
from fairy.data.keys import CompanyKeys


def test_company_fields(make_fairy: Callable[..., Fairy]) -> None:
    fairy = make_fairy("en")
    data = fairy.data_master
    fragments = set(data.get_string_list(CompanyKeys.NAMES))
    for _ in range(50):
        company = fairy.company()
        assert set(company.name.split()) <= fragments
        assert company.suffix in data.get_string_list(CompanyKeys.SUFFIXES)
        assert company.full_name == f"{company.name} {company.suffix}"
        assert company.email.endswith("@" + company.domain)
        assert company.domain.split(".")[0] == company.name.lower().replace(" ", "-")
        assert re.fullmatch(r"GB\d{3} \d{4} \d{2}", company.vat_identification_number)
        assert re.fullmatch(r"\d{8}", company.registration_number)


def test_locale_specific_suffixes(make_fairy: Callable[..., Fairy]) -> None:
    en = make_fairy("en", seed=42)
    fr = make_fairy("fr", seed=42)
    en_suffixes = set(en.data_master.get_string_list(CompanyKeys.SUFFIXES))
    fr_suffixes = set(fr.data_master.get_string_list(CompanyKeys.SUFFIXES))
    assert not en_suffixes & fr_suffixes
    for _ in range(20):
        en_company = en.company()
        fr_company = fr.company()
        assert en_company.suffix in en_suffixes
        assert fr_company.suffix in fr_suffixes
        assert re.fullmatch(r"FR\d{2} \d{9}", fr_company.vat_identification_number)


def test_polish_company_domain_is_ascii(make_fairy: Callable[..., Fairy]) -> None:
    fairy = make_fairy("pl")
    for _ in range(30):
        company = fairy.company()
        assert company.domain.isascii()
        assert re.fullmatch(r"\d{3}-\d{3}-\d{2}-\d{2}", company.vat_identification_number)


def test_company_with_non_latin_name_gets_usable_domain(tmp_path: Path) -> None:
    (tmp_path / "fairy_ru.yml").write_text(
        "company:\n"
        "  names: [Газпром]\n"
        "  suffixes: [ООО]\n"
        '  vat_identification_number_format: "##########"\n'
        '  registration_number_format: "#############"\n'
        "net:\n"
        "  domain_words: [neftegaz]\n",
        encoding="utf-8",
    )
    fairy = Fairy.builder().with_locale("ru").with_search_path([tmp_path]).with_random_seed(3).build()
    company = fairy.company()
    assert company.name == "Газпром"
    assert company.domain.startswith("neftegaz.")
    assert company.email.endswith("@" + company.domain)
    assert "@." not in company.email
