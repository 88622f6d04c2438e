from collections import Counter

from passmaker.entities import GenerationRequest, Profile
from passmaker.errors import ValidationError


MAX_LEET_LEVEL = 9


def check_profile(profile: Profile) -> None:
    symbols = profile.symbols
    if len(symbols) < 2:
        raise ValidationError(
            "alphabet_size",
            f"Alphabet needs at least 2 symbols, got {len(symbols)}",
        )

    duplicates = [symbol for symbol, count in Counter(symbols).items() if count > 1]
    if duplicates:
        raise ValidationError(
            "alphabet_unique",
            f"Alphabet contains repeated symbols: {duplicates!r}",
        )

    if profile.length < 1:
        raise ValidationError(
            "length", f"Password length must be at least 1, got {profile.length}"
        )

    if not 0 <= profile.leet_level <= MAX_LEET_LEVEL:
        raise ValidationError(
            "leet_level",
            f"Leet level must be between 0 and {MAX_LEET_LEVEL}, got {profile.leet_level}",
        )

    if not profile.hash_algorithm:
        raise ValidationError("hash_algorithm", "No hash algorithm selected")


def check_master_secret(master_secret: str) -> None:
    if not master_secret:
        raise ValidationError("master_secret", "No master secret given")


def check_text(text: str) -> None:
    if not text:
        raise ValidationError(
            "text", "Nothing to hash besides the master secret"
        )


def check_request(request: GenerationRequest) -> None:
    check_profile(request.profile)
    check_master_secret(request.master_secret.get_secret_value())
    if request.counter is not None and request.counter < 0:
        raise ValidationError(
            "counter", f"Counter must not be negative, got {request.counter}"
        )
