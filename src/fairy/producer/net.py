"""Network identifiers: IP and MAC addresses, domain names and URLs."""

from __future__ import annotations

import re
import unicodedata

from fairy.data import DataMaster
from fairy.data.keys import NetKeys
from fairy.utils.errors import DataKeyError

from .base import BaseProducer

__all__ = ["NetworkProducer", "ascii_slug"]

_FOLD = str.maketrans({"ł": "l", "Ł": "L", "ß": "ss", "ø": "o", "Ø": "O", "æ": "ae", "œ": "oe", "đ": "d"})


def ascii_slug(text: str, sep: str = "") -> str:
    """Lower-case ASCII form of ``text`` with non-alphanumeric runs replaced by ``sep``."""

    folded = unicodedata.normalize("NFKD", text.translate(_FOLD))
    folded = folded.encode("ascii", "ignore").decode("ascii").lower()
    return re.sub(r"[^a-z0-9]+", sep, folded).strip(sep)


class NetworkProducer:
    def __init__(self, data: DataMaster, base: BaseProducer) -> None:
        self.data = data
        self.base = base

    def ipv4(self) -> str:
        """Return a dotted-quad address avoiding ``0`` and ``255`` in the first octet."""

        first = self.base.random_between(1, 254)
        rest = [self.base.random_between(0, 255) for _ in range(3)]
        return ".".join(str(octet) for octet in [first, *rest])

    def ipv6(self) -> str:
        return ":".join(self.base.random_hex(4) for _ in range(8))

    def mac_address(self, sep: str = ":") -> str:
        """Return a unicast, locally administered MAC address."""

        first = (self.base.random_between(0, 255) & 0b11111100) | 0b00000010
        octets = [first, *(self.base.random_between(0, 255) for _ in range(5))]
        return sep.join(f"{octet:02x}" for octet in octets)

    def domain_word(self) -> str:
        words = [w for w in map(ascii_slug, self.data.get_string_list(NetKeys.DOMAIN_WORDS)) if w]
        if not words:
            raise DataKeyError(f"{NetKeys.DOMAIN_WORDS} has no entries usable in a domain name")
        return self.base.random_element(words)

    def domain(self, name: str | None = None) -> str:
        """Return ``name`` slugified under a random suffix.

        A random domain word is used when ``name`` is missing or has no ASCII
        letters or digits to keep.
        """

        label = ascii_slug(name, "-") if name else ""
        if not label:
            label = self.domain_word()
        suffix = self.base.random_element(self.data.get_string_list(NetKeys.DOMAIN_SUFFIXES))
        return f"{label}.{suffix}"

    def url(self, https: bool = False) -> str:
        pattern = self.base.random_element(self.data.get_string_list(NetKeys.URL_FORMATS))
        return self.base.templatify(
            pattern,
            {
                "scheme": "https" if https else "http",
                "domain": self.domain(),
                "word": self.domain_word(),
                "word2": self.domain_word(),
            },
        )
