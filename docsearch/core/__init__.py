"""Domain core: models, strategies, services."""
