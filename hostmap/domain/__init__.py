"""Domain layer: entities, events and repository contracts."""
