"""Domain errors."""


class DocSearchError(Exception):
    """Base error for document search."""


class KnowledgeIndexError(DocSearchError):
    """Knowledge folder or one of its documents could not be read."""


class TenantNotLoadedError(DocSearchError, KeyError):
    """No index has been loaded for the tenant."""

    def __init__(self, tenant_id: str):
        super().__init__(tenant_id)
        self.tenant_id = tenant_id

    def __str__(self) -> str:
        return f"No knowledge index loaded for tenant '{self.tenant_id}'"
