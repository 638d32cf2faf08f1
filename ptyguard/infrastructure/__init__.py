"""Infrastructure layer - OS-facing adapters."""
