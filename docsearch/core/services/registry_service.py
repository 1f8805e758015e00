"""Knowledge registry - one index per tenant."""

import logging
import threading
from pathlib import Path
from typing import Optional

from ..exceptions import TenantNotLoadedError
from ..models.document import KnowledgeIndex, SearchResult
from .ingest_service import IngestService
from .search_service import SearchService

logger = logging.getLogger(__name__)


class KnowledgeRegistry:
    """Holds the current knowledge index of every loaded tenant.

    Indexes are immutable. Loading a tenant again builds a fresh index and
    swaps the reference, searches in flight keep the old one.
    """

    def __init__(self, ingest_service: IngestService, search_service: SearchService):
        self._ingest_service = ingest_service
        self._search_service = search_service
        self._indexes: dict[str, KnowledgeIndex] = {}
        self._lock = threading.Lock()

    def load(self, tenant_id: str, folder_path: str | Path) -> KnowledgeIndex:
        """Build (or rebuild) the tenant index from its folder.

        A failed build leaves the previously loaded index in place.
        """
        index = self._ingest_service.build(tenant_id, folder_path)
        with self._lock:
            replaced = tenant_id in self._indexes
            self._indexes[tenant_id] = index
        logger.info(
            f"{'Reloaded' if replaced else 'Loaded'} tenant '{tenant_id}': {len(index)} chunks"
        )
        return index

    def get(self, tenant_id: str) -> KnowledgeIndex:
        index = self._indexes.get(tenant_id)
        if index is None:
            raise TenantNotLoadedError(tenant_id)
        return index

    def tenants(self) -> list[str]:
        return sorted(self._indexes)

    def search(
        self, tenant_id: str, query: str, top_k: Optional[int] = None
    ) -> list[SearchResult]:
        return self._search_service.search(self.get(tenant_id), query, top_k)
