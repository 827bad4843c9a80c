"""Random polynomial generation with an injected random source.

Responsibilities:
- Produce bounded random integer coefficient vectors for fixtures and demos.
- Keep randomness reproducible by drawing only from a caller-owned generator.
"""

from __future__ import annotations

import random

from .errors import RangeError
from .models.datatypes import Polynomial

DEFAULT_MIN_TERMS = 2
DEFAULT_MAX_TERMS = 10
DEFAULT_MIN_VALUE = -10
DEFAULT_MAX_VALUE = 10


class RandomPolynomialGenerator:
    """Generate random polynomials from an explicitly passed `random.Random`.

    The generator is not shared between threads; give each thread its own
    instance and seed.
    """

    def __init__(self, rng: random.Random) -> None:
        """Bind the generator to its random source."""

        self._rng = rng

    def coefficients(
        self,
        min_terms: int = DEFAULT_MIN_TERMS,
        max_terms: int = DEFAULT_MAX_TERMS,
        min_value: int = DEFAULT_MIN_VALUE,
        max_value: int = DEFAULT_MAX_VALUE,
        allow_all_zero: bool = True,
    ) -> list[float]:
        """Draw a random coefficient vector.

        The term count is drawn from `[min_terms, max_terms]` and each
        coefficient from `[min_value, max_value]`, both inclusive; reversed
        bounds are swapped. With `allow_all_zero=False`, one position is forced
        non-zero when every draw came out zero.

        Raises:
            RangeError: If a term count is negative, or the value range is
                `0..0` while `allow_all_zero` is false.
        """

        if min_terms < 0 or max_terms < 0:
            raise RangeError("Term counts cannot be negative.")

        if min_value == 0 and max_value == 0:
            if not allow_all_zero:
                raise RangeError(
                    "`min_value` and `max_value` are both 0, so `allow_all_zero` "
                    "must be true."
                )
            return [0.0]

        low_count, high_count = sorted((min_terms, max_terms))
        low_value, high_value = sorted((min_value, max_value))
        count = self._rng.randint(low_count, high_count)
        values = [float(self._rng.randint(low_value, high_value)) for _ in range(count)]
        if not values:
            values = [0.0]

        if not allow_all_zero and all(value == 0 for value in values):
            values[self._rng.randrange(len(values))] = float(
                self._non_zero_value(low_value, high_value)
            )
        return values

    def polynomial(
        self,
        min_terms: int = DEFAULT_MIN_TERMS,
        max_terms: int = DEFAULT_MAX_TERMS,
        min_value: int = DEFAULT_MIN_VALUE,
        max_value: int = DEFAULT_MAX_VALUE,
        allow_all_zero: bool = True,
    ) -> Polynomial:
        """Draw a random `Polynomial`; see `coefficients` for the rules."""

        return Polynomial(
            self.coefficients(
                min_terms=min_terms,
                max_terms=max_terms,
                min_value=min_value,
                max_value=max_value,
                allow_all_zero=allow_all_zero,
            )
        )

    def _non_zero_value(self, low: int, high: int) -> int:
        """Draw one non-zero integer from `[low, high]`, which must hold one."""

        if low > 0 or high < 0:
            return self._rng.randint(low, high)
        if low == 0:
            return self._rng.randint(1, high)
        if high == 0:
            return self._rng.randint(low, -1)
        if self._rng.randrange(2) == 0:
            return self._rng.randint(low, -1)
        return self._rng.randint(1, high)
