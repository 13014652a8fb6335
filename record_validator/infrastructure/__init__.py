"""Infrastructure layer: default engine, custom rules and state machines."""
