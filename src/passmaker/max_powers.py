"""Largest power of an alphabet size that fits into a digest chunk.

A chunk of `n` bytes holds integers up to `2**(8*n) - 1`. For an alphabet of
size `base` the largest exponent `e` with `base**e` in that range tells how
many symbols (`e + 1`, counting `base**0`) one chunk yields.
"""

from threading import Lock
from typing import NamedTuple

from loguru import logger

from passmaker.config import config
from passmaker.errors import EncodingError


class MaxPower(NamedTuple):
    power: int
    exponent: int

    @property
    def symbols(self) -> int:
        return self.exponent + 1


# (chunk bytes, alphabet size) -> exponent for MD4/MD5, SHA1/RIPEMD160 and
# SHA256 chunks and the usual charsets: digits, hex, special characters only,
# letters, letters and digits, and the 94-symbol default.
PRECOMPUTED_EXPONENTS: dict[tuple[int, int], int] = {
    (16, 10): 38,
    (16, 16): 31,
    (16, 32): 25,
    (16, 52): 22,
    (16, 62): 21,
    (16, 94): 19,
    (20, 10): 48,
    (20, 16): 39,
    (20, 32): 31,
    (20, 52): 28,
    (20, 62): 26,
    (20, 94): 24,
    (32, 10): 77,
    (32, 16): 63,
    (32, 32): 51,
    (32, 52): 44,
    (32, 62): 42,
    (32, 94): 39,
}


def compute_max_power(chunk_bytes: int, base: int) -> MaxPower:
    if base < 2:
        raise EncodingError(f"Alphabet size must be at least 2, got {base}")
    if chunk_bytes < 1:
        raise EncodingError(f"Digest chunks must not be empty, got {chunk_bytes} bytes")

    limit = (1 << (8 * chunk_bytes)) - 1
    power, exponent = 1, 0
    # square while possible, then finish with single multiplications
    while power * power * base <= limit:
        power *= power * base
        exponent = 2 * exponent + 1
    while power * base <= limit:
        power *= base
        exponent += 1
    return MaxPower(power=power, exponent=exponent)


class MaxPowerTable:
    """Thread-safe memo of `compute_max_power`.

    Entries are only ever added; a value computed twice during a race is the
    same value, and the first stored one is kept.
    """

    def __init__(
        self,
        *,
        cache: bool | None = None,
        precomputed: bool | None = None,
    ):
        self.cache_enabled = config.cache_max_powers if cache is None else cache
        self._entries: dict[tuple[int, int], MaxPower] = {}
        self._lock = Lock()
        use_precomputed = config.precomputed_max_powers if precomputed is None else precomputed
        if use_precomputed:
            for (chunk_bytes, base), exponent in PRECOMPUTED_EXPONENTS.items():
                self._entries[(chunk_bytes, base)] = MaxPower(base**exponent, exponent)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._entries

    def lookup(self, chunk_bytes: int, base: int) -> MaxPower:
        key = (chunk_bytes, base)
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        entry = compute_max_power(chunk_bytes, base)
        if not self.cache_enabled:
            return entry

        with self._lock:
            stored = self._entries.setdefault(key, entry)
        if stored is entry:
            logger.debug(
                f"Cached max power for {chunk_bytes}-byte chunks in base {base}: "
                f"exponent {entry.exponent}"
            )
        return stored
