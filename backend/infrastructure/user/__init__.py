"""User infrastructure: repositories, password hashing and authentication."""
