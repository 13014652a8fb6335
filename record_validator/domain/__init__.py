"""Domain layer: rule types, rule storage and the pure resolution services."""
