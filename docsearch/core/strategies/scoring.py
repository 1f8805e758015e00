"""Scoring strategies for lexical passage search."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..models.document import Chunk
from ..text import normalize_for_search, tokenize


@dataclass(frozen=True)
class ParsedQuery:
    """Query in the forms the strategies compare against."""
    text: str
    tokens: tuple[str, ...]
    normalized: str
    token_set: frozenset[str] = field(repr=False)

    @classmethod
    def parse(cls, query: str) -> "ParsedQuery":
        tokens = tuple(tokenize(query))
        return cls(
            text=query,
            tokens=tokens,
            normalized=normalize_for_search(query),
            token_set=frozenset(tokens),
        )

    def __bool__(self) -> bool:
        return bool(self.tokens)


class ScoringStrategy(ABC):
    """Base class for scoring strategies."""

    @abstractmethod
    def score(self, query: ParsedQuery, chunk: Chunk) -> int:
        """Score contribution of chunk for query."""
        ...


class TokenOverlapStrategy(ScoringStrategy):
    """Points for every distinct query token found in the chunk tokens."""

    def __init__(self, weight: int = 2):
        self._weight = weight

    def score(self, query: ParsedQuery, chunk: Chunk) -> int:
        return self._weight * len(query.token_set.intersection(chunk.tokens))


class TitleBoostStrategy(ScoringStrategy):
    """Points for every distinct query token found in the document title."""

    def __init__(self, weight: int = 1):
        self._weight = weight

    def score(self, query: ParsedQuery, chunk: Chunk) -> int:
        return self._weight * len(query.token_set.intersection(tokenize(chunk.title)))


class SubstringBoostStrategy(ScoringStrategy):
    """Flat boost when the whole normalized query occurs in the chunk text.

    Helps exact phrases, phone numbers and the like.
    """

    def __init__(self, boost: int = 4):
        self._boost = boost

    def score(self, query: ParsedQuery, chunk: Chunk) -> int:
        if query.normalized and query.normalized in normalize_for_search(chunk.text):
            return self._boost
        return 0


def default_scoring_strategies(
    overlap_weight: int = 2, title_weight: int = 1, substring_boost: int = 4
) -> list[ScoringStrategy]:
    return [
        TokenOverlapStrategy(overlap_weight),
        TitleBoostStrategy(title_weight),
        SubstringBoostStrategy(substring_boost),
    ]
