"""NIF keys: eight-digit identification numbers used as tree keys."""

from __future__ import annotations

import random as _random
from functools import total_ordering

MIN_NUMBER = 10_000_000
MAX_NUMBER = 99_999_999
SENTINEL = -1
_RANDOM_LIMIT = 100_000_000


class InvalidNifError(ValueError):
    """Raised when a NIF number does not have eight digits."""

    def __init__(self, value: object) -> None:
        super().__init__(f"El número de NIF debe tener 8 dígitos: {value!r}")
        self.value = value


def _is_valid(number: int) -> bool:
    return MIN_NUMBER <= number <= MAX_NUMBER or number == SENTINEL


@total_ordering
class Nif:
    """An eight-digit NIF number; ``-1`` is accepted as an end-of-input marker."""

    __slots__ = ("_number",)

    def __init__(self, number: int) -> None:
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidNifError(number)
        if not _is_valid(number):
            raise InvalidNifError(number)
        self._number = number

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Nif:
        """Return a NIF with a random number below 100000000 (unchecked, like the generator)."""
        source = rng if rng is not None else _random
        nif = cls.__new__(cls)
        nif._number = source.randrange(_RANDOM_LIMIT)
        return nif

    @classmethod
    def parse(cls, text: str) -> Nif:
        """Build a NIF from its decimal text."""
        try:
            number = int(text.strip())
        except (ValueError, AttributeError) as exc:
            raise InvalidNifError(text) from exc
        return cls(number)

    def is_sentinel(self) -> bool:
        """True for the ``-1`` marker that ends a run of keys."""
        return self._number == SENTINEL

    def __int__(self) -> int:
        return self._number

    def __index__(self) -> int:
        return self._number

    def __str__(self) -> str:
        return str(self._number)

    def __repr__(self) -> str:
        return f"Nif({self._number})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Nif):
            return self._number == other._number
        if isinstance(other, int) and not isinstance(other, bool):
            return self._number == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Nif):
            return self._number < other._number
        if isinstance(other, int) and not isinstance(other, bool):
            return self._number < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._number)