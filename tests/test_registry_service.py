"""Tests for the per-tenant knowledge registry."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from docsearch.core.exceptions import KnowledgeIndexError, TenantNotLoadedError
from docsearch.core.services import KnowledgeRegistry


@pytest.fixture
def registry(ingest_service, search_service) -> KnowledgeRegistry:
    return KnowledgeRegistry(ingest_service, search_service)


class TestKnowledgeRegistry:

    def test_load_and_search(self, registry, knowledge_dir):
        index = registry.load("autolife", knowledge_dir)
        assert registry.get("autolife") is index
        assert registry.tenants() == ["autolife"]
        assert registry.search("autolife", "brake pads")[0].source_file == "pricing.txt"

    def test_unknown_tenant(self, registry):
        with pytest.raises(TenantNotLoadedError) as exc_info:
            registry.get("nobody")
        assert isinstance(exc_info.value, KeyError)
        assert "nobody" in str(exc_info.value)

    def test_tenants_are_isolated(self, registry, knowledge_dir, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "faq.txt").write_text("FAQ\n\nWe only sell bicycles.", encoding="utf-8")

        registry.load("autolife", knowledge_dir)
        registry.load("bikes", other)

        assert registry.tenants() == ["autolife", "bikes"]
        assert registry.search("autolife", "bicycles") == []
        assert registry.search("bikes", "brake pads") == []

    def test_reload_is_full_rebuild(self, registry, knowledge_dir):
        first = registry.load("autolife", knowledge_dir)
        (knowledge_dir / "pricing.txt").unlink()
        second = registry.load("autolife", knowledge_dir)

        assert second is not first
        assert registry.get("autolife") is second
        assert len(first) == 4
        assert second.source_files == ["company.txt"]

    def test_failed_reload_keeps_previous_index(self, registry, knowledge_dir):
        index = registry.load("autolife", knowledge_dir)
        (knowledge_dir / "bad.txt").write_bytes(b"\xff\xfe")

        with pytest.raises(KnowledgeIndexError):
            registry.load("autolife", knowledge_dir)
        assert registry.get("autolife") is index

    def test_concurrent_searches(self, registry, knowledge_dir):
        registry.load("autolife", knowledge_dir)
        expected = registry.search("autolife", "saturday opening hours")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda _: registry.search("autolife", "saturday opening hours"), range(32))
            )
        assert all(r == expected for r in results)
