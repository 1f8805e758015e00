import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


def configure_container(settings: Settings) -> Container:
    """Build the application context.

    Args:
        settings: Application settings.

    Returns:
        Configured container, to be passed to whatever needs it.
    """
    from .core.protocols.document_loader import DocumentLoaderProtocol
    from .core.services.chunk_service import ChunkService
    from .core.services.ingest_service import IngestService
    from .core.services.registry_service import KnowledgeRegistry
    from .core.services.search_service import SearchService
    from .core.strategies.scoring import default_scoring_strategies
    from .infrastructure.document_loaders import TextLoader
    from .presentation.agent_tool import SearchDocsTool

    container = Container()

    container.register(DocumentLoaderProtocol, TextLoader, singleton=True)

    container.register(
        ChunkService,
        lambda: ChunkService(max_chunk_chars=settings.max_chunk_chars),
        singleton=True,
    )

    container.register(
        IngestService,
        lambda: IngestService(
            loader=container.resolve(DocumentLoaderProtocol),
            chunker=container.resolve(ChunkService),
        ),
        singleton=True,
    )

    container.register(
        SearchService,
        lambda: SearchService(
            top_k=settings.search_top_k,
            strategies=default_scoring_strategies(
                overlap_weight=settings.overlap_weight,
                title_weight=settings.title_weight,
                substring_boost=settings.substring_boost,
            ),
        ),
        singleton=True,
    )

    container.register(
        KnowledgeRegistry,
        lambda: KnowledgeRegistry(
            ingest_service=container.resolve(IngestService),
            search_service=container.resolve(SearchService),
        ),
        singleton=True,
    )

    container.register(
        SearchDocsTool,
        lambda: SearchDocsTool(
            registry=container.resolve(KnowledgeRegistry),
            tenant_id=settings.tenant_id,
            description=settings.tool_description,
            not_found_message=settings.not_found_message,
            top_k=settings.search_top_k,
        ),
        singleton=True,
    )

    logger.info("Container configured")
    return container
