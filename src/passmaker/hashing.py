from types import ModuleType
from typing import Protocol, runtime_checkable

from Crypto.Hash import HMAC, MD4, MD5, RIPEMD160, SHA1, SHA256

from passmaker.entities import HashAlgorithm
from passmaker.errors import HashCapabilityError


@runtime_checkable
class HashCapability(Protocol):
    """Digest primitives injected into a derivation.

    Implementations must be deterministic and return a fixed number of bytes
    per algorithm.
    """

    def digest(self, algorithm: str, message: bytes) -> bytes: ...

    def hmac(self, algorithm: str, key: bytes, message: bytes) -> bytes: ...


_MODULES: dict[HashAlgorithm, ModuleType] = {
    HashAlgorithm.MD4: MD4,
    HashAlgorithm.MD5: MD5,
    HashAlgorithm.SHA1: SHA1,
    HashAlgorithm.SHA256: SHA256,
    HashAlgorithm.RIPEMD160: RIPEMD160,
}


class CryptoHashCapability:
    """HashCapability backed by PyCryptodome.

    PyCryptodome ships MD4 and RIPEMD-160 regardless of the OpenSSL build,
    which hashlib does not guarantee.
    """

    def _module(self, algorithm: str) -> ModuleType:
        try:
            return _MODULES[HashAlgorithm(algorithm.lower())]
        except ValueError as e:
            raise HashCapabilityError(f"Unsupported hash algorithm: {algorithm}") from e

    def digest_size(self, algorithm: str) -> int:
        return self._module(algorithm).digest_size

    def digest(self, algorithm: str, message: bytes) -> bytes:
        return self._module(algorithm).new(message).digest()

    def hmac(self, algorithm: str, key: bytes, message: bytes) -> bytes:
        return HMAC.new(key, msg=message, digestmod=self._module(algorithm)).digest()
