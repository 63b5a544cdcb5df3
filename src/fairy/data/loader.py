"""Locate, parse and merge locale data resources.

Resources follow the naming convention ``<prefix>.yml`` for the base file and
``<prefix>_<language>.yml`` for the locale override.  Each name is looked up
first among the bundled package resources and then in every directory of the
caller's search path; all matches are merged in that order so that user files
extend or override the bundled data.

Merging rules (:func:`merge_resources`):

* scalars from the override replace base scalars;
* lists are concatenated, base items first;
* mappings are merged recursively;
* on a shape clash the override value wins.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from importlib import resources as importlib_resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import yaml

from fairy.utils.errors import ConfigurationError, DataLoadError, DataParseError
from fairy.utils.logging import get_logger

__all__ = [
    "language_code",
    "resource_names",
    "merge_resources",
    "find_resources",
    "parse_resource",
    "load_resources",
]

log = get_logger(__name__)

_LANG_RE = re.compile(r"^([A-Za-z]{2,3})(?:[_-].*)?$")

SearchPath = Iterable[str | os.PathLike[str]]


def language_code(locale: str) -> str:
    """Return the lower-cased language part of ``locale`` (``"pl_PL"`` -> ``"pl"``)."""

    m = _LANG_RE.fullmatch(locale.strip())
    if not m:
        raise ConfigurationError(f"invalid locale: {locale!r}")
    return m.group(1).lower()


def resource_names(prefix: str, locale: str) -> tuple[str, str]:
    """Return the base and locale resource file names for ``prefix``."""

    if not prefix or not prefix.strip():
        raise ConfigurationError("file prefix must not be empty")
    return f"{prefix}.yml", f"{prefix}_{language_code(locale)}.yml"


def merge_resources(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` onto ``base`` returning a new dict."""

    result: dict[str, Any] = dict(base)
    for key, o_val in override.items():
        b_val = result.get(key)
        if isinstance(b_val, Mapping) and isinstance(o_val, Mapping):
            result[key] = merge_resources(b_val, o_val)
        elif isinstance(b_val, list) and isinstance(o_val, list):
            result[key] = [*b_val, *o_val]
        else:
            result[key] = o_val
    return result


def find_resources(name: str, search_path: SearchPath = ()) -> list[Traversable | Path]:
    """Return every location of resource ``name``, bundled copy first."""

    found: list[Traversable | Path] = []
    bundled = importlib_resources.files("fairy.data").joinpath("resources", name)
    if bundled.is_file():
        found.append(bundled)
    for directory in search_path:
        candidate = Path(directory) / name
        if candidate.is_file():
            found.append(candidate)
    return found


def parse_resource(source: Traversable | Path) -> dict[str, Any]:
    """Parse a single YAML resource into a mapping."""

    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"cannot read data resource {source}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataParseError(f"malformed data resource {source}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataParseError(
            f"data resource {source} must contain a mapping, got {type(data).__name__}"
        )
    return data


def _load_all(name: str, search_path: SearchPath) -> tuple[dict[str, Any], int]:
    merged: dict[str, Any] = {}
    sources = find_resources(name, search_path)
    for source in sources:
        log.debug("reading data resource %s", source)
        merged = merge_resources(merged, parse_resource(source))
    return merged, len(sources)


def load_resources(
    prefix: str,
    locale: str,
    search_path: SearchPath = (),
) -> dict[str, Any]:
    """Load and merge the base and locale resources for ``prefix``.

    Raises
    ------
    DataLoadError
        If no base resource named ``<prefix>.yml`` exists on the search path.
    DataParseError
        If any resource is not a well-formed YAML mapping.
    """

    search_path = [Path(p) for p in search_path]
    base_name, locale_name = resource_names(prefix, locale)

    base, base_count = _load_all(base_name, search_path)
    if base_count == 0:
        where = ", ".join(str(p) for p in search_path) or "bundled resources"
        raise DataLoadError(f"data resource {base_name!r} not found in {where}")

    overlay, locale_count = _load_all(locale_name, search_path)
    if locale_count == 0:
        log.debug("no locale resource %s; using base data only", locale_name)
        return base
    return merge_resources(base, overlay)
