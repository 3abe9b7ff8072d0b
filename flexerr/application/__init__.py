"""Application layer: the declarative error-type generator."""
