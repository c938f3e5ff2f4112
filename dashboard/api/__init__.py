"""API routers of the dashboard."""
