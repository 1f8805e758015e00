"""Document loader protocol for dependency injection."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentLoaderProtocol(Protocol):
    """Protocol for reading tenant documents."""

    def supports(self, file_path: Path) -> bool:
        """Whether the file is a document this loader reads."""
        ...

    def load(self, file_path: Path) -> str:
        """Read the full document text.

        Args:
            file_path: Document path.

        Returns:
            Document text.
        """
        ...
