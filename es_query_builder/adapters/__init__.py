"""Search engine adapters for the query builder."""
