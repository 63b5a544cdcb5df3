"""Typed exceptions for data loading, data lookups and producer arguments."""


class FairyError(Exception):
    """Base class for all errors raised by the package."""


class ConfigurationError(FairyError):
    """Raised when the generator cannot be configured."""


class DataLoadError(ConfigurationError):
    """Raised when a required data resource cannot be located or read."""


class DataParseError(ConfigurationError):
    """Raised when a data resource is not a well-formed YAML mapping."""


class DataKeyError(FairyError, LookupError):
    """Raised when a key is absent from the data store or has the wrong shape."""


class InvalidArgumentError(FairyError, ValueError):
    """Raised when a producer is called with impossible arguments."""
