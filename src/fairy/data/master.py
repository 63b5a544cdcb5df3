"""The merged, read-only data store shared by all producers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from fairy.utils.errors import DataKeyError

from .loader import load_resources

__all__ = ["DataMaster"]

_MISSING = object()


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class DataMaster:
    """Immutable view over merged locale data.

    Keys are dotted paths into the nested mapping (``"person.last_names"``).
    Mappings are exposed as :class:`types.MappingProxyType` and sequences as
    tuples so the store can be shared between threads without locking.
    """

    __slots__ = ("_data", "locale", "file_prefix")

    def __init__(
        self,
        data: Mapping[str, Any],
        *,
        locale: str | None = None,
        file_prefix: str | None = None,
    ) -> None:
        self._data: Mapping[str, Any] = _freeze(data)
        self.locale = locale
        self.file_prefix = file_prefix

    @classmethod
    def load(
        cls,
        file_prefix: str,
        locale: str,
        search_path: Iterable[str | os.PathLike[str]] = (),
    ) -> "DataMaster":
        """Load ``<file_prefix>.yml`` and its ``locale`` override into a new store."""

        data = load_resources(file_prefix, locale, search_path)
        return cls(data, locale=locale, file_prefix=file_prefix)

    # -- Lookups ----------------------------------------------------------

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping):
                return _MISSING
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return _MISSING
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._lookup(key) is not _MISSING

    def get_value(self, key: str, default: Any = _MISSING) -> Any:
        """Return the raw value stored under ``key``."""

        value = self._lookup(key)
        if value is _MISSING:
            if default is not _MISSING:
                return default
            raise DataKeyError(f"no data for key {key!r}")
        return value

    def get_string(self, key: str) -> str:
        value = self.get_value(key)
        if not isinstance(value, str):
            raise DataKeyError(f"key {key!r} does not hold a string")
        return value

    def get_number(self, key: str, default: Any = _MISSING) -> float:
        value = self.get_value(key, default)
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise DataKeyError(f"key {key!r} does not hold a number")
        return value

    def get_string_list(self, key: str) -> Sequence[str]:
        value = self.get_value(key)
        if not isinstance(value, tuple) or not all(isinstance(v, str) for v in value):
            raise DataKeyError(f"key {key!r} does not hold a list of strings")
        return value

    def get_mapping(self, key: str) -> Mapping[str, Any]:
        value = self.get_value(key)
        if not isinstance(value, Mapping):
            raise DataKeyError(f"key {key!r} does not hold a mapping")
        return value

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy of the store."""

        return _thaw(self._data)

    def __repr__(self) -> str:
        return f"DataMaster(file_prefix={self.file_prefix!r}, locale={self.locale!r})"
