from typing import Iterable

from passmaker.conversion import BaseConverter
from passmaker.errors import EncodingError
from passmaker.grapheme import grapheme_count, truncate_graphemes
from passmaker.leet import leetify


class PostProcessor:
    """Builds the final password from converted password parts.

    Post-hash leet is applied to each part on its own, matching PasswordMaker
    Pro; lowercasing a whole joined password would treat a trailing sigma of
    one part differently.
    """

    def __init__(
        self,
        converter: BaseConverter,
        *,
        length: int,
        prefix: str = "",
        suffix: str = "",
        post_leet_level: int = 0,
    ):
        assert length >= 1, "length must be positive"
        self.converter = converter
        self.length = length
        self.prefix = prefix
        self.suffix = suffix
        self.post_leet_level = post_leet_level

    def part_text(self, indices: Iterable[int]) -> str:
        return leetify(self.converter.to_text(indices), self.post_leet_level)

    def core(self, parts: Iterable[list[int]]) -> str:
        """Exactly `length` grapheme clusters of password text.

        Parts are consumed lazily; more are pulled whenever joining or leet
        merged clusters and left the text short.
        """
        pieces: list[str] = []
        for indices in parts:
            pieces.append(self.part_text(indices))
            if grapheme_count("".join(pieces)) >= self.length:
                break
        else:
            raise EncodingError(
                f"Password parts exhausted before reaching {self.length} characters"
            )
        return truncate_graphemes("".join(pieces), self.length)

    def assemble(self, parts: Iterable[list[int]]) -> str:
        return f"{self.prefix}{self.core(parts)}{self.suffix}"
