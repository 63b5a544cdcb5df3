"""Locale data resources and the merged, read-only data store."""

from .loader import language_code, load_resources, merge_resources, resource_names
from .master import DataMaster

__all__ = [
    "DataMaster",
    "language_code",
    "load_resources",
    "merge_resources",
    "resource_names",
]
