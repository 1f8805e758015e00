"""Ingest service - tenant knowledge indexing."""

import logging
from pathlib import Path

from ..exceptions import KnowledgeIndexError
from ..models.document import Chunk, KnowledgeIndex
from ..protocols.document_loader import DocumentLoaderProtocol
from .chunk_service import ChunkService

logger = logging.getLogger(__name__)


class IngestService:
    """Service for building a tenant's in-memory knowledge index."""

    def __init__(self, loader: DocumentLoaderProtocol, chunker: ChunkService):
        """Initialize ingest service.

        Args:
            loader: Document loader, decides which files are documents.
            chunker: Chunk service.
        """
        self._loader = loader
        self._chunker = chunker

    def build(self, tenant_id: str, folder_path: str | Path) -> KnowledgeIndex:
        """Index the documents directly inside a folder.

        Files are processed in name order. Any read failure aborts the
        whole build.

        Args:
            tenant_id: Tenant the index belongs to.
            folder_path: Folder with the tenant documents (not recursive).

        Returns:
            Knowledge index.

        Raises:
            KnowledgeIndexError: Folder or a document could not be read.
        """
        folder = Path(folder_path)

        try:
            files = sorted(
                (p for p in folder.iterdir() if p.is_file() and self._loader.supports(p)),
                key=lambda p: p.name,
            )
        except OSError as e:
            logger.error(f"Cannot list knowledge folder {folder}: {e}")
            raise KnowledgeIndexError(f"Cannot list knowledge folder {folder}: {e}") from e

        chunks: list[Chunk] = []
        for file_path in files:
            logger.debug(f"Processing file: {file_path.name}")
            try:
                content = self._loader.load(file_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to load {file_path}: {e}")
                raise KnowledgeIndexError(f"Failed to load {file_path}: {e}") from e

            chunks.extend(self._chunker.chunk(content, tenant_id, str(file_path)))

        logger.info(
            f"Indexing complete for '{tenant_id}': {len(chunks)} chunks from {len(files)} files"
        )
        return KnowledgeIndex(tenant_id=tenant_id, chunks=tuple(chunks))
