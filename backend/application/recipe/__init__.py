"""Recipe application layer: commands and queries."""
