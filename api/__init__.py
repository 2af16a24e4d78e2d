"""Quiz HTTP API."""
