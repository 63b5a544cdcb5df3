"""Generic sampling primitives shared by every producer.

:class:`BaseProducer` wraps the single :class:`random.Random` of a
:class:`~fairy.fairy.Fairy`.  All randomness in the package goes through it so
that seeding the generator fixes the output of the whole system.

Invalid arguments (an empty candidate list, an inverted range, a negative
count) raise :class:`~fairy.utils.errors.InvalidArgumentError`; nothing is
silently clamped.
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Mapping, Sequence
from typing import TypeVar

from fairy.utils.errors import InvalidArgumentError

__all__ = ["BaseProducer"]

T = TypeVar("T")

_TEMPLATE_RE = re.compile(r"\{(\w+)\}|#|\?")


class BaseProducer:
    """Random sampling helpers bound to one generator."""

    def __init__(self, rng: random.Random) -> None:
        self.random = rng

    # -- Numbers ----------------------------------------------------------

    def random_between(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``."""

        if low > high:
            raise InvalidArgumentError(f"empty range: {low} > {high}")
        return self.random.randint(low, high)

    def true_or_false(self, probability: float = 0.5) -> bool:
        """Return ``True`` with the given ``probability``."""

        if not 0.0 <= probability <= 1.0:
            raise InvalidArgumentError("probability must be within [0.0, 1.0]")
        return self.random.random() < probability

    def random_digits(self, count: int) -> str:
        """Return a string of ``count`` random decimal digits."""

        if count < 0:
            raise InvalidArgumentError("count must not be negative")
        return "".join(str(self.random.randint(0, 9)) for _ in range(count))

    def random_hex(self, count: int) -> str:
        """Return ``count`` lower-case hexadecimal digits."""

        if count < 0:
            raise InvalidArgumentError("count must not be negative")
        return "".join(self.random.choice("0123456789abcdef") for _ in range(count))

    def random_string(self, length: int, alphabet: str = string.ascii_letters + string.digits) -> str:
        if length < 0:
            raise InvalidArgumentError("length must not be negative")
        if not alphabet:
            raise InvalidArgumentError("alphabet must not be empty")
        return "".join(self.random.choice(alphabet) for _ in range(length))

    # -- Sequences --------------------------------------------------------

    def random_element(self, options: Sequence[T]) -> T:
        """Return one element of ``options`` chosen uniformly."""

        if not options:
            raise InvalidArgumentError("cannot pick from an empty sequence")
        return self.random.choice(options)

    def random_elements(self, options: Sequence[T], count: int) -> list[T]:
        """Return ``count`` independent picks from ``options``."""

        if count < 0:
            raise InvalidArgumentError("count must not be negative")
        return [self.random_element(options) for _ in range(count)]

    def weighted_element(self, options: Sequence[T], weights: Sequence[float]) -> T:
        """Return one element of ``options`` with probability proportional to ``weights``."""

        if not options:
            raise InvalidArgumentError("cannot pick from an empty sequence")
        if len(options) != len(weights):
            raise InvalidArgumentError(
                f"got {len(options)} options but {len(weights)} weights"
            )
        if any(w < 0 for w in weights):
            raise InvalidArgumentError("weights must not be negative")
        if sum(weights) <= 0:
            raise InvalidArgumentError("weights must not all be zero")
        return self.random.choices(options, weights=weights, k=1)[0]

    def weighted_key(self, weighted: Mapping[T, float]) -> T:
        """Return a key of ``weighted`` chosen by its value as weight."""

        keys = list(weighted)
        return self.weighted_element(keys, [weighted[k] for k in keys])

    # -- Templates --------------------------------------------------------

    def numerify(self, pattern: str) -> str:
        """Replace each ``#`` in ``pattern`` with a random digit."""

        return "".join(str(self.random.randint(0, 9)) if ch == "#" else ch for ch in pattern)

    def letterify(self, pattern: str) -> str:
        """Replace each ``?`` in ``pattern`` with a random lower-case letter."""

        return "".join(
            self.random.choice(string.ascii_lowercase) if ch == "?" else ch for ch in pattern
        )

    def bothify(self, pattern: str) -> str:
        return self.letterify(self.numerify(pattern))

    def templatify(self, pattern: str, substitutions: Mapping[str, str] | None = None) -> str:
        """Fill ``pattern`` in a single left-to-right pass.

        ``{name}`` is replaced with ``substitutions[name]``, ``#`` with a random
        digit and ``?`` with a random lower-case letter.  Substituted text is
        not scanned again.
        """

        subs = substitutions or {}

        def _fill(m: re.Match[str]) -> str:
            name = m.group(1)
            if name is not None:
                if name not in subs:
                    raise InvalidArgumentError(f"no substitution for placeholder {{{name}}}")
                return str(subs[name])
            if m.group(0) == "#":
                return str(self.random.randint(0, 9))
            return self.random.choice(string.ascii_lowercase)

        return _TEMPLATE_RE.sub(_fill, pattern)
