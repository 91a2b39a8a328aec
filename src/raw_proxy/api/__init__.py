"""HTTP API for raw-proxy."""
