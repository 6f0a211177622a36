"""GraphQL API (strawberry) for the recipe backend."""
