"""HTTP API for customer records."""
