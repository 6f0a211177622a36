"""Helpers shared by GraphQL resolvers."""
