"""Protocol interfaces for dependency injection."""
from .document_loader import DocumentLoaderProtocol

__all__ = [
    "DocumentLoaderProtocol",
]
