"""Chunk service - document to passages."""

import logging
import re
from pathlib import PurePath

from ..models.document import Chunk
from ..strategies.passages import PassageStrategy, default_passage_strategies
from ..text import stable_id, tokenize

logger = logging.getLogger(__name__)

# Sentence end: ".", "!" or "?" followed by whitespace. Best effort, abbreviations
# and decimals with a trailing space split too.
_SENTENCE_RE = re.compile(r"(?<=[.!?])\s+")


class ChunkService:
    """Split one raw document into titled, identified chunks."""

    def __init__(
        self,
        max_chunk_chars: int = 1800,
        strategies: list[PassageStrategy] | None = None,
    ):
        """Initialize chunk service.

        Args:
            max_chunk_chars: Passage length above which sentence splitting kicks in.
            strategies: Shape strategies, first match wins. The last one should
                always match.
        """
        self._max_chunk_chars = max_chunk_chars
        self._strategies = strategies or default_passage_strategies()

    def chunk(self, text: str, tenant_id: str, source_file: str) -> list[Chunk]:
        """Chunk a document.

        Never raises on malformed content: degenerate documents produce
        fewer or shorter chunks.

        Args:
            text: Raw document text.
            tenant_id: Owning tenant.
            source_file: Path of the document; only its name is kept on chunks.

        Returns:
            Chunks in passage order.
        """
        file_name = PurePath(source_file).name
        title, body = self._split_title(text)
        if not title:
            title = file_name

        passages = []
        for passage in self._raw_passages(body):
            if len(passage) <= self._max_chunk_chars:
                passages.append(passage)
            else:
                passages.extend(self._split_long(passage))

        doc_id = f"{tenant_id}:{file_name}"
        doc_hash = stable_id(tenant_id, source_file, title)

        chunks = []
        for idx, passage in enumerate(passages):
            passage = passage.strip()
            if not passage:
                continue
            chunks.append(
                Chunk(
                    tenant_id=tenant_id,
                    doc_id=doc_id,
                    chunk_id=f"{doc_hash}#{idx}",
                    source_file=file_name,
                    title=title,
                    text=passage,
                    tokens=tuple(tokenize(passage)),
                )
            )

        logger.debug(f"Chunked {file_name}: {len(chunks)} chunks")
        return chunks

    def _split_title(self, text: str) -> tuple[str, str]:
        """First non-blank line and everything after it."""
        text = text.removeprefix("\ufeff")
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        for i, line in enumerate(lines):
            if line.strip():
                return line.strip(), "\n".join(lines[i + 1 :]).strip()
        return "", ""

    def _raw_passages(self, body: str) -> list[str]:
        for strategy in self._strategies:
            if strategy.matches(body):
                logger.debug(f"Document shape: {strategy.name}")
                return strategy.split(body)
        return []

    def _split_long(self, passage: str) -> list[str]:
        """Greedy sentence packing up to max_chunk_chars.

        A single sentence longer than the limit is kept whole.
        """
        parts = []
        buf = ""
        for sentence in _SENTENCE_RE.split(passage):
            if len((buf + " " + sentence).strip()) <= self._max_chunk_chars:
                buf = f"{buf} {sentence}" if buf else sentence
            else:
                if buf:
                    parts.append(buf.strip())
                buf = sentence
        if buf:
            parts.append(buf.strip())
        return parts
