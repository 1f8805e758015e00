"""Core business services."""
from .chunk_service import ChunkService
from .ingest_service import IngestService
from .search_service import SearchService
from .registry_service import KnowledgeRegistry

__all__ = [
    "ChunkService",
    "IngestService",
    "SearchService",
    "KnowledgeRegistry",
]
