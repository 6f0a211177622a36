"""Recipe core: entities, value objects, errors and ports."""
