"""Application layer: use case orchestration over core rules and boundaries."""
