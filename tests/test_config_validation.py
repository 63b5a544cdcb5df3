from pathlib import Path

import pytest
from pydantic import ValidationError

from fairy.config import load_config
from fairy.utils.errors import ConfigurationError


def test_inverted_age_range(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("person:\n  min_age: 60\n  max_age: 20\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_age(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("person:\n  min_age: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


@pytest.mark.parametrize("locale", ["", "e", "english!", "12"])
def test_invalid_locale(tmp_path: Path, locale: str) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text(f'locale: "{locale}"\n')
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_blank_prefix(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text('data:\n  file_prefix: "  "\n')
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_malformed_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("locale: [unterminated\n")
    with pytest.raises(ConfigurationError, match="invalid YAML"):
        load_config(cfg_file, env={})


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_config(cfg_file, env={})


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file, env={}).locale == "en"
