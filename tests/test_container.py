"""Tests for settings and dependency wiring."""

import pytest

from docsearch.config.settings import Settings
from docsearch.container import Container, configure_container
from docsearch.core.protocols import DocumentLoaderProtocol
from docsearch.core.services import KnowledgeRegistry, SearchService
from docsearch.presentation.agent_tool import SearchDocsTool


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("KNOWLEDGE_DIR", raising=False)
        settings = Settings(_env_file=None)
        assert settings.tenant_id == "autolife"
        assert settings.knowledge_dir == "./knowledge/autolife"
        assert settings.max_chunk_chars == 1800
        assert settings.search_top_k == 3

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("KNOWLEDGE_DIR", "/srv/kb")
        monkeypatch.setenv("SEARCH_TOP_K", "5")
        settings = Settings(_env_file=None)
        assert settings.knowledge_dir == "/srv/kb"
        assert settings.search_top_k == 5


class TestContainer:

    def test_singletons(self):
        container = configure_container(Settings(_env_file=None))
        assert container.resolve(KnowledgeRegistry) is container.resolve(KnowledgeRegistry)
        assert isinstance(container.resolve(DocumentLoaderProtocol), DocumentLoaderProtocol)

    def test_containers_are_independent(self):
        first = configure_container(Settings(_env_file=None))
        second = configure_container(Settings(_env_file=None))
        assert first.resolve(KnowledgeRegistry) is not second.resolve(KnowledgeRegistry)

    def test_unregistered(self):
        with pytest.raises(KeyError):
            Container().resolve(SearchService)

    def test_reset(self):
        container = configure_container(Settings(_env_file=None))
        before = container.resolve(SearchService)
        container.reset()
        assert container.resolve(SearchService) is not before

    def test_end_to_end(self, knowledge_dir):
        settings = Settings(_env_file=None, tenant_id="autolife", substring_boost=0)
        container = configure_container(settings)
        container.resolve(KnowledgeRegistry).load("autolife", knowledge_dir)

        payload = container.resolve(SearchDocsTool).payload("brake pads price")
        # substring boost disabled: overlap 6 + title 1
        assert payload["found"] is True
        assert container.resolve(KnowledgeRegistry).search("autolife", "brake pads price")[0].score == 7
