"""Domain models."""
from .document import Chunk, KnowledgeIndex, SearchResult

__all__ = [
    "Chunk",
    "KnowledgeIndex",
    "SearchResult",
]
