"""Passage strategies: turn a document body into raw passages."""
import re
from abc import ABC, abstractmethod

_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


class PassageStrategy(ABC):
    """Base class for document shape strategies."""

    name: str = "base"

    @abstractmethod
    def matches(self, body: str) -> bool:
        """Whether the whole body has this strategy's shape."""
        ...

    @abstractmethod
    def split(self, body: str) -> list[str]:
        """Split body into raw passages."""
        ...


class TablePassageStrategy(PassageStrategy):
    """Pipe-delimited rows rendered as sentence-like passages.

    A row ``Oil change|$40|synthetic`` becomes
    ``Service: Oil change. Price: $40. Notes: synthetic.``. Fields past the
    number of labels are ignored, missing or empty fields are left out.
    """

    name = "table"
    DEFAULT_LABELS = ("Service", "Price", "Notes")

    def __init__(self, labels: tuple[str, ...] | None = None, delimiter: str = "|"):
        """Initialize strategy.

        Args:
            labels: Column labels, one per semantic column.
            delimiter: Column delimiter.
        """
        self._labels = tuple(labels or self.DEFAULT_LABELS)
        self._delimiter = delimiter

    def matches(self, body: str) -> bool:
        return any(self._delimiter in line for line in body.split("\n"))

    def split(self, body: str) -> list[str]:
        lines = [line.strip() for line in body.split("\n")]
        rows = [
            line
            for line in lines
            if line and not line.startswith("#") and self._delimiter in line
        ]
        return [self._row_to_passage(row) for row in rows]

    def _row_to_passage(self, row: str) -> str:
        fields = [f.strip() for f in row.split(self._delimiter)]
        parts = [
            f"{label}: {value}."
            for label, value in zip(self._labels, fields)
            if value
        ]
        return " ".join(parts)


class ParagraphPassageStrategy(PassageStrategy):
    """Blank-line separated paragraphs, hard wraps joined into one line."""

    name = "paragraph"

    def matches(self, body: str) -> bool:
        return True

    def split(self, body: str) -> list[str]:
        paragraphs = (p.strip() for p in _PARAGRAPH_BREAK_RE.split(body))
        return [_LINE_BREAK_RE.sub(" ", p) for p in paragraphs if p]


def default_passage_strategies() -> list[PassageStrategy]:
    """Table shape first, prose as the fallback."""
    return [TablePassageStrategy(), ParagraphPassageStrategy()]
