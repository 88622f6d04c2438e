"""Chains digest invocations until they cover the requested password length.

Iteration `i` hashes with the master secret, suffixed by "\\n" and `i` from
the second iteration on, so every iteration yields a different digest.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from math import ceil, log2

from loguru import logger

from passmaker.config import config
from passmaker.conversion import count_symbols
from passmaker.errors import EncodingError, HashCapabilityError
from passmaker.hashing import HashCapability
from passmaker.leet import leetify
from passmaker.max_powers import MaxPowerTable


class ChainState(StrEnum):
    ACCUMULATING = "accumulating"
    SUFFICIENT = "sufficient"
    DONE = "done"


@dataclass
class DigestAccumulator:
    chunks: list[bytes] = field(default_factory=list)
    state: ChainState = ChainState.ACCUMULATING

    @property
    def iterations(self) -> int:
        return len(self.chunks)

    @property
    def chunk_size(self) -> int:
        return len(self.chunks[0]) if self.chunks else 0

    @property
    def data(self) -> bytes:
        return b"".join(self.chunks)

    def append(self, digest: bytes) -> None:
        if not digest:
            raise HashCapabilityError("Hash capability returned an empty digest")
        if self.chunks and len(digest) != self.chunk_size:
            raise HashCapabilityError(
                f"Digest size changed from {self.chunk_size} to {len(digest)} bytes"
            )
        self.chunks.append(digest)


def chain_key(master_secret: str, iteration: int) -> str:
    if iteration == 0:
        return master_secret
    return f"{master_secret}\n{iteration}"


def iteration_bound(required_symbols: int, base: int, digest_size: int) -> int:
    """Upper bound on chain iterations in padded mode."""
    return ceil(required_symbols * log2(base) / (8 * digest_size)) + 1


class HashChainGenerator:
    """Call-scoped digest chain for one text and master secret."""

    def __init__(
        self,
        capability: HashCapability,
        algorithm: str,
        text: str,
        master_secret: str,
        max_powers: MaxPowerTable,
        *,
        use_hmac: bool = False,
        pre_leet_level: int = 0,
        trim_leading_zeros: bool = False,
        extra_iterations: int | None = None,
    ):
        self.capability = capability
        self.algorithm = algorithm
        self.text = text
        self.master_secret = master_secret
        self.max_powers = max_powers
        self.use_hmac = use_hmac
        self.pre_leet_level = pre_leet_level
        self.trim_leading_zeros = trim_leading_zeros
        self.extra_iterations = (
            config.extra_chain_iterations if extra_iterations is None else extra_iterations
        )
        self._max_iterations: int | None = None

    def _hash(self, iteration: int) -> bytes:
        key = chain_key(self.master_secret, iteration)
        try:
            if self.use_hmac:
                # key and text are leetified separately, leet(a) + leet(b) != leet(a + b)
                return self.capability.hmac(
                    self.algorithm,
                    leetify(key, self.pre_leet_level).encode("utf-8"),
                    leetify(self.text, self.pre_leet_level).encode("utf-8"),
                )
            message = leetify(key + self.text, self.pre_leet_level)
            return self.capability.digest(self.algorithm, message.encode("utf-8"))
        except HashCapabilityError:
            raise
        except Exception as e:
            raise HashCapabilityError(
                f"{'HMAC' if self.use_hmac else 'Digest'} {self.algorithm} failed"
            ) from e

    def _iterate(self, accumulator: DigestAccumulator) -> None:
        if self._max_iterations is not None and accumulator.iterations >= self._max_iterations:
            raise EncodingError(
                f"Digest chain exhausted after {accumulator.iterations} iterations"
            )
        digest = self._hash(accumulator.iterations)
        if not isinstance(digest, (bytes, bytearray)):
            raise HashCapabilityError(
                f"Hash capability returned {type(digest).__name__}, expected bytes"
            )
        accumulator.append(bytes(digest))

    def _available(self, accumulator: DigestAccumulator, base: int) -> int:
        if not self.trim_leading_zeros:
            return accumulator.iterations * self.max_powers.lookup(accumulator.chunk_size, base).symbols
        return sum(
            count_symbols(chunk, base, self.max_powers, trim_leading_zeros=True)
            for chunk in accumulator.chunks
        )

    def accumulate(self, required_symbols: int, base: int) -> DigestAccumulator:
        accumulator = DigestAccumulator()
        while accumulator.state != ChainState.DONE:
            match accumulator.state:
                case ChainState.ACCUMULATING:
                    self._iterate(accumulator)
                    if self._max_iterations is None:
                        per_chunk = self.max_powers.lookup(accumulator.chunk_size, base).symbols
                        self._max_iterations = ceil(required_symbols / per_chunk) + self.extra_iterations
                    if self._available(accumulator, base) >= required_symbols:
                        accumulator.state = ChainState.SUFFICIENT
                case ChainState.SUFFICIENT:
                    accumulator.state = ChainState.DONE

        logger.debug(
            f"{self.algorithm} chain ({'hmac' if self.use_hmac else 'digest'}) "
            f"produced {accumulator.iterations} chunks of {accumulator.chunk_size} bytes "
            f"for {required_symbols} symbols in base {base}"
        )
        return accumulator

    def extend(self, accumulator: DigestAccumulator) -> bytes:
        """Run one more iteration on a finished accumulator and return its digest."""
        self._iterate(accumulator)
        return accumulator.chunks[-1]
