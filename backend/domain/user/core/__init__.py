"""User core: entities, value objects, errors and ports."""
