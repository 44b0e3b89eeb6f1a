"""HTTP API for the contact relay."""
