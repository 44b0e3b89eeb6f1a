"""Application layer - ports, composition and use cases."""
