from loguru import logger

from passmaker.config import config, configure_logging
from passmaker.entities import (
    DEFAULT_ALPHABET,
    GenerationRequest,
    HashAlgorithm,
    LeetWhen,
    Profile,
    ProtocolUsage,
    SubdomainPolicy,
)
from passmaker.errors import (
    EncodingError,
    HashCapabilityError,
    PassmakerError,
    ValidationError,
)
from passmaker.hashing import CryptoHashCapability, HashCapability
from passmaker.maker import PasswordMaker, derive
from passmaker.max_powers import MaxPowerTable


if config.log_enabled:
    configure_logging()
else:
    logger.disable("passmaker")


__all__ = [
    "DEFAULT_ALPHABET",
    "CryptoHashCapability",
    "EncodingError",
    "GenerationRequest",
    "HashAlgorithm",
    "HashCapability",
    "HashCapabilityError",
    "LeetWhen",
    "MaxPowerTable",
    "PasswordMaker",
    "PassmakerError",
    "Profile",
    "ProtocolUsage",
    "SubdomainPolicy",
    "ValidationError",
    "derive",
]
