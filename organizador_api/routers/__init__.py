"""API routers for Organizador API."""
