"""API routers for raw-proxy."""
