"""Infrastructure layer: adapters for host reflection."""
