"""Typer-based command line interface.

Each command builds a :class:`~fairy.fairy.Fairy` from the configuration
(package defaults, optional ``--config`` YAML, ``FAIRY_SEED`` environment
variable, then command line options) and prints ``--count`` generated values
as JSON lines on stdout.

Exit codes
----------
0 success
4 configuration error (bad config file, unknown locale, missing data file)
5 generation error (invalid producer arguments)
"""

from __future__ import annotations

import dataclasses
import enum
import json
import os
import re
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .fairy import Fairy
from .utils.errors import ConfigurationError, FairyError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="fairy",
    help="Generate locale aware synthetic data as JSON lines.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def _apply_overrides(
    cfg: ConfigModel,
    *,
    locale: str | None,
    seed: str | None,
    prefix: str | None,
    search_path: list[Path] | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if locale is not None:
        new_cfg.locale = locale
    if seed is not None:
        new_cfg.random.seed = int(seed) if re.fullmatch(r"-?\d+", seed) else seed
    if prefix is not None:
        new_cfg.data.file_prefix = prefix
    if search_path:
        new_cfg.data.search_path = [*new_cfg.data.search_path, *search_path]
    return new_cfg


class _Options:
    """Options shared by every generating command."""

    def __init__(self) -> None:
        self.locale: str | None = None
        self.seed: str | None = None
        self.prefix: str | None = None
        self.search_path: list[Path] | None = None
        self.config_path: Path | None = None
        self.count = 1


_opts = _Options()


def _build_fairy() -> Fairy:
    try:
        cfg = load_config(_opts.config_path)
        cfg = _apply_overrides(
            cfg,
            locale=_opts.locale,
            seed=_opts.seed,
            prefix=_opts.prefix,
            search_path=_opts.search_path,
        )
        ConfigModel.model_validate(cfg.model_dump())
        return Fairy.from_config(cfg)
    except (ValidationError, ConfigurationError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _emit(produce: Callable[[Fairy], Any]) -> None:
    fairy = _build_fairy()
    try:
        for _ in range(_opts.count):
            typer.echo(json.dumps(_jsonable(produce(fairy)), ensure_ascii=False))
    except FairyError as exc:
        _safe_exit(5, str(exc))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main(
    locale: Optional[str] = typer.Option(  # noqa: B008
        None, "--locale", "-l", help="Locale such as en, pl or fr_FR"
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", "-s", help="Integer or string seed for reproducible output"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    prefix: Optional[str] = typer.Option(  # noqa: B008
        None, "--prefix", help="Data file prefix (default: fairy)"
    ),
    search_path: Optional[list[Path]] = typer.Option(  # noqa: B008
        None, "--search-path", help="Extra directory holding data files"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log data loading to stderr"
    ),
) -> None:
    """Generate synthetic data."""

    configure_logging(verbose)
    _opts.locale = locale
    _opts.seed = seed
    _opts.count = count
    _opts.config_path = config_path
    _opts.prefix = prefix
    _opts.search_path = search_path


@app.command()
def person(
    sex: Optional[str] = typer.Option(None, help="male or female"),  # noqa: B008
    min_age: Optional[int] = typer.Option(None, help="Minimum age"),  # noqa: B008
    max_age: Optional[int] = typer.Option(None, help="Maximum age"),  # noqa: B008
) -> None:
    """Print fake people."""

    overrides = {
        k: v for k, v in {"sex": sex, "min_age": min_age, "max_age": max_age}.items() if v is not None
    }
    _emit(lambda f: f.person(**overrides))


@app.command()
def company() -> None:
    """Print fake companies."""

    _emit(lambda f: f.company())


@app.command()
def text(
    latin: bool = typer.Option(False, "--latin", help="Use the lorem ipsum corpus"),  # noqa: B008
    sentences: int = typer.Option(3, min=1, help="Sentences per paragraph"),  # noqa: B008
) -> None:
    """Print random paragraphs."""

    _emit(lambda f: f.text(latin=latin).paragraph(sentences))


@app.command()
def card(
    vendor: Optional[str] = typer.Option(None, help="Card vendor such as VISA"),  # noqa: B008
) -> None:
    """Print fake payment cards."""

    def _card(f: Fairy) -> dict[str, Any]:
        produced = f.credit_card().produce(vendor)
        return {**_jsonable(produced), "masked": produced.masked, "expiry": produced.expiry}

    _emit(_card)


@app.command()
def iban() -> None:
    """Print fake IBANs for the locale's country."""

    _emit(lambda f: f.credit_card().iban())


@app.command()
def network(
    kind: str = typer.Argument("url", help="ipv4, ipv6, mac, domain or url"),  # noqa: B008
    https: bool = typer.Option(False, "--https", help="Use https URLs"),  # noqa: B008
) -> None:
    """Print fake network identifiers."""

    producers: dict[str, Callable[[Fairy], str]] = {
        "ipv4": lambda f: f.network().ipv4(),
        "ipv6": lambda f: f.network().ipv6(),
        "mac": lambda f: f.network().mac_address(),
        "domain": lambda f: f.network().domain(),
        "url": lambda f: f.network().url(https=https),
    }
    if kind not in producers:
        _safe_exit(2, f"unknown kind {kind!r}; expected one of {sorted(producers)}")
    _emit(producers[kind])
