from itertools import dropwhile
from typing import Iterable, Sequence

from passmaker.errors import EncodingError
from passmaker.max_powers import MaxPowerTable


def chunk_digits(
    chunk: bytes,
    base: int,
    max_powers: MaxPowerTable,
    *,
    trim_leading_zeros: bool = False,
) -> list[int]:
    """Digits of a big-endian chunk in `base`, most significant first.

    A chunk always yields `exponent + 1` digits, zero padded on the left to
    the chunk's full width, unless `trim_leading_zeros` is set.
    """
    if base < 2:
        raise EncodingError(f"Alphabet size must be at least 2, got {base}")
    power, exponent = max_powers.lookup(len(chunk), base)
    value = int.from_bytes(chunk, "big")

    digits = []
    # value < base**(exponent + 1) holds before every step
    for _ in range(exponent + 1):
        digit, value = divmod(value, power)
        digits.append(digit)
        value *= base

    if trim_leading_zeros:
        return list(dropwhile(lambda d: d == 0, digits))
    return digits


def count_symbols(
    chunk: bytes,
    base: int,
    max_powers: MaxPowerTable,
    *,
    trim_leading_zeros: bool = False,
) -> int:
    if not trim_leading_zeros:
        return max_powers.lookup(len(chunk), base).symbols
    return len(chunk_digits(chunk, base, max_powers, trim_leading_zeros=True))


class BaseConverter:
    def __init__(
        self,
        symbols: Sequence[str],
        max_powers: MaxPowerTable,
        *,
        trim_leading_zeros: bool = False,
    ):
        if len(symbols) < 2:
            raise EncodingError(f"Alphabet needs at least 2 symbols, got {len(symbols)}")
        if len(set(symbols)) != len(symbols):
            raise EncodingError("Alphabet symbols must be unique")
        self.symbols = tuple(symbols)
        self.base = len(self.symbols)
        self.max_powers = max_powers
        self.trim_leading_zeros = trim_leading_zeros

    def convert_chunk(self, chunk: bytes) -> list[int]:
        return chunk_digits(
            chunk,
            self.base,
            self.max_powers,
            trim_leading_zeros=self.trim_leading_zeros,
        )

    def to_text(self, indices: Iterable[int]) -> str:
        try:
            return "".join(self.symbols[i] for i in indices)
        except IndexError as e:
            raise EncodingError(f"Digit outside of base {self.base}") from e
