"""doclinks - dead link checker for markdown documentation trees."""
