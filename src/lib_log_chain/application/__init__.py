"""Application layer: ports, registry and use cases."""
