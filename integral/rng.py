"""64-bit Mersenne Twister and a per-thread shared generator."""

from __future__ import annotations

import secrets
import threading
from typing import Iterable

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

DEFAULT_SEED = 5489
RANDOM_SEED = 0x1333317

_N = 312
_M = 156
_MATRIX_A = 0xB5026F5AA96619E9
_LOWER_MASK = (1 << 31) - 1
_UPPER_MASK = MASK64 ^ _LOWER_MASK
_INIT_MULTIPLIER = 6364136223846793005


def _seed_seq_mix(value: int) -> int:
    return value ^ (value >> 27)


def _seed_seq_generate(values: list[int], count: int) -> list[int]:
    """Expand seed material into count 32-bit words (standard seed sequence)."""
    n = count
    s = len(values)
    words = [0x8B8B8B8B] * n
    if n == 0:
        return words
    if n >= 623:
        t = 11
    elif n >= 68:
        t = 7
    elif n >= 39:
        t = 5
    elif n >= 7:
        t = 3
    else:
        t = (n - 1) // 2
    p = (n - t) // 2
    q = p + t
    m = max(s + 1, n)

    for k in range(m):
        r1 = (1664525 * _seed_seq_mix(words[k % n] ^ words[(k + p) % n] ^ words[(k - 1) % n])) & MASK32
        if k == 0:
            r2 = r1 + s
        elif k <= s:
            r2 = r1 + k % n + values[k - 1]
        else:
            r2 = r1 + k % n
        r2 &= MASK32
        words[(k + p) % n] = (words[(k + p) % n] + r1) & MASK32
        words[(k + q) % n] = (words[(k + q) % n] + r2) & MASK32
        words[k % n] = r2

    for k in range(m, m + n):
        total = (words[k % n] + words[(k + p) % n] + words[(k - 1) % n]) & MASK32
        r3 = (1566083941 * _seed_seq_mix(total)) & MASK32
        r4 = (r3 - k % n) & MASK32
        words[(k + p) % n] ^= r3
        words[(k + q) % n] ^= r4
        words[k % n] = r4

    return words


class MT19937_64:
    """The 64-bit Mersenne Twister engine."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state: list[int] = []
        self._index = _N
        self.seed(seed)

    def seed(self, value: int) -> None:
        state = [value & MASK64]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULTIPLIER * (prev ^ (prev >> 62)) + i) & MASK64)
        self._state = state
        self._index = _N

    def seed_sequence(self, values: Iterable[int]) -> None:
        """Seed from a list of integers, each reduced to 32 bits."""
        words = _seed_seq_generate([v & MASK32 for v in values], 2 * _N)
        state = [low | (high << 32) for low, high in zip(words[0::2], words[1::2])]
        if state[0] & _UPPER_MASK == 0 and not any(state[1:]):
            state[0] = 1 << 63
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            x = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            shifted = x >> 1
            if x & 1:
                shifted ^= _MATRIX_A
            mt[i] = mt[(i + _M) % _N] ^ shifted
        self._index = 0

    def next_u64(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & MASK64

    def uniform(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], drawn without modulo bias."""
        if high < low:
            raise ValueError("high must not be less than low")
        span = high - low
        if span > MASK64:
            raise ValueError("range exceeds 64 bits")
        if span == MASK64:
            return low + self.next_u64()
        count = span + 1
        product = self.next_u64() * count
        low_bits = product & MASK64
        if low_bits < count:
            threshold = (1 << 64) % count
            while low_bits < threshold:
                product = self.next_u64() * count
                low_bits = product & MASK64
        return low + (product >> 64)


_local = threading.local()


def _generator() -> MT19937_64:
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = MT19937_64(RANDOM_SEED)
        _local.generator = generator
    return generator


def random_seed(base_seed: int, *args: int) -> None:
    """Reseed this thread's generator from system entropy mixed with the given seeds."""
    seed_data = [secrets.randbits(32) for _ in range(4)]
    seed_data.append(base_seed & MASK32)
    seed_data.extend(extra & MASK32 for extra in args)
    _generator().seed_sequence(seed_data)


def random_u64() -> int:
    return _generator().next_u64()


def random_u64_between(low: int, high: int) -> int:
    return _generator().uniform(low, high)