"""Domain layer for shared recipes.

Business rules for recipes and ingredient scaling, decoupled from the
GraphQL presentation and from infrastructure.
"""
