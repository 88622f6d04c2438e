from enum import StrEnum
from functools import cached_property
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from passmaker.config import config
from passmaker.grapheme import graphemes


# PasswordMaker Pro's "letters, digits and special characters" charset
DEFAULT_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "`~!@#$%^&*()_-+={}|[]\\:\";'<>?,./"
)


class LeetWhen(StrEnum):
    """When leetspeak is applied during generation"""

    NONE = "none"
    PRE = "pre"  # master secret and hashed text
    POST = "post"  # converted password parts
    BOTH = "both"


class SubdomainPolicy(StrEnum):
    FULL = "full"
    ONE_LEVEL = "one_level"
    DOMAIN_ONLY = "domain_only"


class ProtocolUsage(StrEnum):
    IGNORED = "ignored"
    USED = "used"
    # PasswordMaker Pro writes "undefined" when the protocol is wanted but missing
    USED_WITH_UNDEFINED = "used_with_undefined"


class HashAlgorithm(StrEnum):
    """Algorithms resolved by the bundled digest capability"""

    MD4 = "md4"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    RIPEMD160 = "ripemd160"


class UrlParts(NamedTuple):
    protocol: str
    userinfo: str
    subdomain: str
    domain: str
    port: str
    path: str


class Profile(BaseModel):
    """Generation settings for one site.

    Only types are enforced on construction; domain constraints (unique
    alphabet, length, leet level range) are checked by
    `passmaker.validation.check_profile` before any hashing.
    """

    model_config = ConfigDict(frozen=True)

    alphabet: str = DEFAULT_ALPHABET
    length: int = 8
    prefix: str = ""
    suffix: str = ""
    leet_level: int = 0
    leet_when: LeetWhen = LeetWhen.NONE
    use_hmac: bool = False
    hash_algorithm: str = Field(default_factory=lambda: config.default_hash_algorithm)
    subdomain_policy: SubdomainPolicy = SubdomainPolicy.DOMAIN_ONLY
    modifier: str = ""
    use_protocol: ProtocolUsage = ProtocolUsage.IGNORED
    use_userinfo: bool = False
    use_port_path: bool = False
    trim_leading_zeros: bool = False

    @cached_property
    def symbols(self) -> tuple[str, ...]:
        return tuple(graphemes(self.alphabet))


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    master_secret: SecretStr
    site: str
    username: str = ""
    counter: int | None = None
    profile: Profile = Field(default_factory=Profile)

    @property
    def modifier(self) -> str:
        if self.counter is None:
            return self.profile.modifier
        return f"{self.profile.modifier}{self.counter}"
