"""Application layer: use cases wiring domain services to the outside."""
