"""User application layer: account and session commands, queries."""
