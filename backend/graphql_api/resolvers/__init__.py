"""GraphQL resolvers."""
