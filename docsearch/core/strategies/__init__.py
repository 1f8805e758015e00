"""Passage and scoring strategies."""
from .passages import (
    ParagraphPassageStrategy,
    PassageStrategy,
    TablePassageStrategy,
    default_passage_strategies,
)
from .scoring import (
    ParsedQuery,
    ScoringStrategy,
    SubstringBoostStrategy,
    TitleBoostStrategy,
    TokenOverlapStrategy,
    default_scoring_strategies,
)

__all__ = [
    "PassageStrategy",
    "TablePassageStrategy",
    "ParagraphPassageStrategy",
    "default_passage_strategies",
    "ParsedQuery",
    "ScoringStrategy",
    "TokenOverlapStrategy",
    "TitleBoostStrategy",
    "SubstringBoostStrategy",
    "default_scoring_strategies",
]
