"""Application layer: ports, signal helpers and use cases."""
