import pytest

from passmaker.entities import Profile
from passmaker.hashing import CryptoHashCapability
from passmaker.max_powers import MaxPowerTable


class ConstantDigestCapability:
    """Returns the same digest for every input, keyed or not."""

    def __init__(self, digest: bytes = b"\x41"):
        self.value = digest
        self.calls = 0

    def digest(self, algorithm: str, message: bytes) -> bytes:
        self.calls += 1
        return self.value

    def hmac(self, algorithm: str, key: bytes, message: bytes) -> bytes:
        self.calls += 1
        return self.value


class CountingCapability(CryptoHashCapability):
    def __init__(self):
        self.calls = 0
        self.messages: list[bytes] = []
        self.keys: list[bytes] = []

    def digest(self, algorithm: str, message: bytes) -> bytes:
        self.calls += 1
        self.messages.append(message)
        return super().digest(algorithm, message)

    def hmac(self, algorithm: str, key: bytes, message: bytes) -> bytes:
        self.calls += 1
        self.keys.append(key)
        self.messages.append(message)
        return super().hmac(algorithm, key, message)


class BrokenCapability:
    def __init__(self):
        self.calls = 0

    def digest(self, algorithm: str, message: bytes) -> bytes:
        self.calls += 1
        raise RuntimeError("digest backend unavailable")

    def hmac(self, algorithm: str, key: bytes, message: bytes) -> bytes:
        self.calls += 1
        raise RuntimeError("hmac backend unavailable")


@pytest.fixture
def constant_capability():
    """Synthetic capability whose digest is always the single byte 0x41"""
    return ConstantDigestCapability()


@pytest.fixture
def counting_capability():
    return CountingCapability()


@pytest.fixture
def broken_capability():
    return BrokenCapability()


@pytest.fixture
def crypto_capability():
    return CryptoHashCapability()


@pytest.fixture
def max_powers():
    return MaxPowerTable()


@pytest.fixture
def binary_profile():
    """Profile of the synthetic-hash scenario: base 2, 8 symbols, no extras"""
    return Profile(alphabet="01", length=8)


# PasswordMaker Pro compatible settings as used by its reference vectors
@pytest.fixture
def compat_profile():
    def make(**overrides) -> Profile:
        return Profile(trim_leading_zeros=True, **overrides)

    return make
