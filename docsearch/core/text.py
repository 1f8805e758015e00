"""Search-form normalization and tokenization."""

import hashlib
import re
import unicodedata

# Combining Diacritical Marks block, left behind by NFKD
_DIACRITICS_RE = re.compile("[\u0300-\u036f]")
# Anything that is not a unicode letter, number or whitespace (\w also admits "_")
_PUNCT_RE = re.compile(r"(?:[^\w\s]|_)+")
_SPACE_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 2


def normalize_for_search(text: str) -> str:
    """Canonical search form of text.

    Lowercases, strips diacritics, turns punctuation runs into a space and
    collapses whitespace. Idempotent.

    Args:
        text: Raw text.

    Returns:
        Normalized text.
    """
    # Compatibility forms such as "ℌ" only decompose to uppercase
    text = unicodedata.normalize("NFKD", text.lower()).lower()
    text = _DIACRITICS_RE.sub("", text)
    text = _PUNCT_RE.sub(" ", text)
    return _SPACE_RE.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Split normalized text into tokens of at least two characters.

    Order and duplicates are preserved.
    """
    return [t for t in normalize_for_search(text).split(" ") if len(t) >= MIN_TOKEN_LENGTH]


def stable_id(*parts: str) -> str:
    """Short deterministic hash of the given parts."""
    return hashlib.sha1("|".join(parts).encode("utf-8")).hexdigest()[:16]
