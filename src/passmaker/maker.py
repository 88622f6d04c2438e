from typing import Iterator

from loguru import logger

from passmaker.chain import DigestAccumulator, HashChainGenerator
from passmaker.conversion import BaseConverter
from passmaker.entities import GenerationRequest, Profile
from passmaker.hashing import CryptoHashCapability, HashCapability
from passmaker.leet import post_leet_level, pre_leet_level
from passmaker.max_powers import MaxPowerTable
from passmaker.postprocess import PostProcessor
from passmaker.url_parsing import assemble_text
from passmaker.validation import (
    check_master_secret,
    check_profile,
    check_request,
    check_text,
)


def _password_parts(
    accumulator: DigestAccumulator,
    generator: HashChainGenerator,
    converter: BaseConverter,
) -> Iterator[list[int]]:
    # accumulated chunks first, then extend the chain on demand
    for chunk in list(accumulator.chunks):
        yield converter.convert_chunk(chunk)
    while True:
        yield converter.convert_chunk(generator.extend(accumulator))


class PasswordMaker:
    """Long-lived derivation service.

    Owns the max power table so repeated derivations share it. Safe to use
    from several threads at once.
    """

    def __init__(
        self,
        capability: HashCapability | None = None,
        max_powers: MaxPowerTable | None = None,
    ):
        self.capability = CryptoHashCapability() if capability is None else capability
        self.max_powers = MaxPowerTable() if max_powers is None else max_powers

    def derive(self, request: GenerationRequest) -> str:
        check_request(request)
        text = assemble_text(
            request.site, request.username, request.modifier, request.profile
        )
        return self._generate(text, request.master_secret.get_secret_value(), request.profile)

    def generate(self, text: str, master_secret: str, profile: Profile) -> str:
        """Generate from an already assembled text-to-use."""
        check_profile(profile)
        check_master_secret(master_secret)
        check_text(text)
        return self._generate(text, master_secret, profile)

    def _generate(self, text: str, master_secret: str, profile: Profile) -> str:
        converter = BaseConverter(
            profile.symbols,
            self.max_powers,
            trim_leading_zeros=profile.trim_leading_zeros,
        )
        generator = HashChainGenerator(
            self.capability,
            profile.hash_algorithm,
            text,
            master_secret,
            self.max_powers,
            use_hmac=profile.use_hmac,
            pre_leet_level=pre_leet_level(profile),
            trim_leading_zeros=profile.trim_leading_zeros,
        )
        logger.debug(
            f"Generating {profile.length} symbols from base {converter.base} "
            f"with {profile.hash_algorithm}"
        )
        accumulator = generator.accumulate(profile.length, converter.base)
        processor = PostProcessor(
            converter,
            length=profile.length,
            prefix=profile.prefix,
            suffix=profile.suffix,
            post_leet_level=post_leet_level(profile),
        )
        try:
            return processor.assemble(_password_parts(accumulator, generator, converter))
        finally:
            accumulator.chunks.clear()


def derive(
    master_secret: str,
    site: str,
    username: str = "",
    profile: Profile | None = None,
    *,
    counter: int | None = None,
    capability: HashCapability | None = None,
    max_powers: MaxPowerTable | None = None,
) -> str:
    """Derive the password for `site` and `username` from `master_secret`.

    Deterministic: the same arguments always produce the same password.
    Raises `ValidationError` before any hashing for bad input,
    `HashCapabilityError` when the digest implementation fails and
    `EncodingError` on internal conversion failures.
    """
    request = GenerationRequest(
        master_secret=master_secret,
        site=site,
        username=username,
        counter=counter,
        profile=Profile() if profile is None else profile,
    )
    return PasswordMaker(capability, max_powers).derive(request)
