"""Per-tenant lexical search over plain-text knowledge documents."""
