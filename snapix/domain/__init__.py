"""Domain layer: entities, events, exceptions and ports."""
