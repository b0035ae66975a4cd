"""Domain layer: models, ports and exceptions. No infrastructure imports."""
