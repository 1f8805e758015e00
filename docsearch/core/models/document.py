"""Document domain models."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chunk:
    """Retrievable passage of a tenant document."""
    tenant_id: str
    doc_id: str
    chunk_id: str  # "<doc hash>#<index>"
    source_file: str  # filename only, for citation
    title: str
    text: str
    tokens: tuple[str, ...] = field(repr=False)


@dataclass(frozen=True)
class KnowledgeIndex:
    """All chunks of one tenant, in file then passage order."""
    tenant_id: str
    chunks: tuple[Chunk, ...] = ()

    def __len__(self) -> int:
        return len(self.chunks)

    @property
    def source_files(self) -> list[str]:
        """Unique source filenames in index order."""
        seen = set()
        sources = []
        for c in self.chunks:
            if c.source_file not in seen:
                seen.add(c.source_file)
                sources.append(c.source_file)
        return sources


@dataclass(frozen=True)
class SearchResult:
    """Scored projection of a matched chunk."""
    chunk_id: str
    title: str
    source_file: str
    text: str
    score: int

    @classmethod
    def from_chunk(cls, chunk: Chunk, score: int) -> "SearchResult":
        return cls(
            chunk_id=chunk.chunk_id,
            title=chunk.title,
            source_file=chunk.source_file,
            text=chunk.text,
            score=score,
        )
