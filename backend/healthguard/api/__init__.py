"""HTTP API package (versioned routers live in api.v1)."""
