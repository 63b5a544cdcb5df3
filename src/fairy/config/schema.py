"""Typed configuration schema and loader for the fairy package."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator, model_validator

from fairy.utils.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

_LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]+)*$")


class DataSettings(BaseModel):
    """Where data resources are looked up."""

    file_prefix: str
    search_path: list[Path] = []

    model_config = ConfigDict(extra="forbid")

    @field_validator("file_prefix")
    @classmethod
    def _prefix_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file_prefix must not be empty")
        return value


class RandomSettings(BaseModel):
    """Settings for the shared random source."""

    seed: int | str | None = None
    seed_env: str

    model_config = ConfigDict(extra="forbid")


class PersonSettings(BaseModel):
    """Default age range for generated persons."""

    min_age: conint(ge=0)
    max_age: conint(ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_range(self) -> "PersonSettings":
        if self.min_age > self.max_age:
            raise ValueError("person.min_age must not exceed person.max_age")
        return self


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    locale: str
    data: DataSettings
    random: RandomSettings
    person: PersonSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if not _LOCALE_RE.fullmatch(value):
            raise ValueError(f"invalid locale: {value!r}")
        return value


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict.

    Lists from ``b`` replace lists from ``a``; data resources use
    :func:`fairy.data.loader.merge_resources` instead, which concatenates them.
    """

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable for the random seed.  A numeric environment value is used as an
    integer seed, anything else as a string seed.
    """

    with (
        importlib_resources.files("fairy.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            try:
                overrides = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"invalid YAML in config {path}: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ConfigurationError(
                f"config {path} must contain a mapping, not {type(overrides).__name__}"
            )
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.random.seed_env
    if seed_env in environ:
        raw = environ[seed_env].strip()
        cfg.random.seed = int(raw) if re.fullmatch(r"-?\d+", raw) else raw

    return cfg


__all__ = [
    "ConfigModel",
    "DataSettings",
    "RandomSettings",
    "PersonSettings",
    "deep_merge_dicts",
    "load_config",
]
