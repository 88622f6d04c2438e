from loguru import logger
import regex


_CLUSTER = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters.

    Text the segmenter cannot handle (for instance lone surrogates) is split
    at code point boundaries instead, which never merges two clusters.
    """
    if not text:
        return []
    try:
        clusters = _CLUSTER.findall(text)
    except (regex.error, ValueError):
        logger.warning("Grapheme segmentation failed, using code points")
        return list(text)
    if "".join(clusters) != text:
        logger.warning("Grapheme segmentation lost text, using code points")
        return list(text)
    return clusters


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def truncate_graphemes(text: str, length: int) -> str:
    assert length >= 0, "length must not be negative"
    return "".join(graphemes(text)[:length])
