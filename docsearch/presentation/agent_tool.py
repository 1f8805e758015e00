"""searchDocs tool for the conversational agent."""
import json
import logging
from typing import Optional

from ..core.models.document import SearchResult
from ..core.services.registry_service import KnowledgeRegistry

logger = logging.getLogger(__name__)


class SearchDocsTool:
    """Wraps tenant search into the agent's found/not-found JSON payload."""

    name = "searchDocs"

    def __init__(
        self,
        registry: KnowledgeRegistry,
        tenant_id: str,
        description: str,
        not_found_message: str,
        top_k: int = 3,
    ):
        self._registry = registry
        self._tenant_id = tenant_id
        self.description = description
        self._not_found_message = not_found_message
        self._top_k = top_k

    @property
    def parameters(self) -> dict:
        """JSON schema of the tool arguments."""
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The specific company information requested.",
                }
            },
            "required": ["query"],
        }

    def payload(self, query: str, top_k: Optional[int] = None) -> dict:
        results = self._registry.search(
            self._tenant_id, query, self._top_k if top_k is None else top_k
        )
        if not results:
            logger.info(f"searchDocs: nothing found for '{query[:50]}'")
            return {"found": False, "message": self._not_found_message}

        return {
            "found": True,
            "passages": [self._passage(r) for r in results],
        }

    def execute(self, query: str, top_k: Optional[int] = None) -> str:
        """Run the tool and serialize its payload."""
        return json.dumps(self.payload(query, top_k), ensure_ascii=False)

    @staticmethod
    def _passage(result: SearchResult) -> dict:
        return {
            "text": result.text,
            "source": f"Source: {result.title} — {result.source_file}",
            "chunkId": result.chunk_id,
        }
