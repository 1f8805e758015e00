"""
Shared test fixtures.

Provides: knowledge folders with sample documents, wired services
"""

from pathlib import Path

import pytest

from docsearch.core.services import ChunkService, IngestService, SearchService
from docsearch.infrastructure.document_loaders import TextLoader

PRICING_TXT = "Autolife Price List\nOil change|$40|synthetic\nBrake pads|$80|front only\n"

COMPANY_TXT = """Autolife Car Services

Opening hours: Monday to Friday 8:00 to 18:00,
Saturday 9:00 to 14:00.

Address: 12 Harbour Street. Phone: +1 555 0142.
"""


@pytest.fixture
def knowledge_dir(tmp_path: Path) -> Path:
    """Tenant folder with one table and one prose document."""
    folder = tmp_path / "autolife"
    folder.mkdir()
    (folder / "pricing.txt").write_text(PRICING_TXT, encoding="utf-8")
    (folder / "company.txt").write_text(COMPANY_TXT, encoding="utf-8")
    return folder


@pytest.fixture
def chunker() -> ChunkService:
    return ChunkService()


@pytest.fixture
def ingest_service(chunker: ChunkService) -> IngestService:
    return IngestService(loader=TextLoader(), chunker=chunker)


@pytest.fixture
def search_service() -> SearchService:
    return SearchService()
