"""Badge services."""
