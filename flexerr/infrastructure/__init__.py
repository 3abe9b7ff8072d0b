"""Infrastructure layer: tracer backends, source adapters and logging."""
