"""Mersenne Twister pseudo random number generator (32-bit mt19937)."""

from __future__ import annotations

__all__ = ["DEFAULT_SEED", "Mt19937"]

DEFAULT_SEED = 5489

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_WORD_MASK = 0xFFFFFFFF
_INIT_MULTIPLIER = 1812433253

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _check_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"seed must be an integer, not {type(value).__name__}")
    return value


class Mt19937:
    """32-bit Mersenne Twister with the output sequence of the standard mt19937 engine.

    Without a seed (or with -1) the generator uses the engine's default seed.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._state: list[int] = []
        self._index = _N
        if seed is None:
            self.seed(DEFAULT_SEED)
            return
        _check_int(seed)
        if not _INT_MIN <= seed <= _INT_MAX:
            raise OverflowError("seed is out of the range of a signed 32-bit integer")
        self.seed(DEFAULT_SEED if seed == -1 else seed)

    def seed(self, value: int = DEFAULT_SEED) -> None:
        """Reset the internal state from ``value`` (taken modulo 2**32)."""
        x = _check_int(value) & _WORD_MASK
        state = [x]
        for i in range(1, _N):
            x = (_INIT_MULTIPLIER * (x ^ (x >> 30)) + i) & _WORD_MASK
            state.append(x)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def eval(self) -> int:
        """Return the next 32-bit unsigned random number."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _WORD_MASK