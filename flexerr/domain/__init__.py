"""Domain layer: capability protocols, detail base, report and value objects."""
