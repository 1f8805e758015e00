"""Search service - lexical passage ranking."""

import logging
from typing import Optional

from ..models.document import KnowledgeIndex, SearchResult
from ..strategies.scoring import (
    ParsedQuery,
    ScoringStrategy,
    default_scoring_strategies,
)

logger = logging.getLogger(__name__)


class SearchService:
    """Linear scan search over a knowledge index.

    Read-only on the index, so one instance can serve concurrent queries.
    """

    def __init__(
        self,
        top_k: int = 3,
        strategies: list[ScoringStrategy] | None = None,
    ):
        """Initialize search service.

        Args:
            top_k: Default number of results to return.
            strategies: Scoring strategies, summed per chunk.
        """
        self._top_k = top_k
        self._strategies = strategies or default_scoring_strategies()

    def search(
        self, index: KnowledgeIndex, query: str, top_k: Optional[int] = None
    ) -> list[SearchResult]:
        """Rank index chunks against a query.

        Args:
            index: Tenant knowledge index.
            query: Free-text query.
            top_k: Override number of results.

        Returns:
            Up to top_k results with positive score, best first. Equal scores
            keep index order.
        """
        top_k = self._top_k if top_k is None else top_k

        parsed = ParsedQuery.parse(query)
        if not parsed:
            logger.debug("Search: query has no tokens")
            return []

        results = []
        for chunk in index.chunks:
            score = sum(s.score(parsed, chunk) for s in self._strategies)
            if score > 0:
                results.append(SearchResult.from_chunk(chunk, score))

        # sorted() is stable with reverse=True too
        results = sorted(results, key=lambda r: r.score, reverse=True)[: max(top_k, 0)]

        logger.info(
            f"Search [{index.tenant_id}]: returned {len(results)}/{top_k} chunks "
            f"for '{query[:50]}' ({len(parsed.tokens)} tokens)"
        )
        return results
