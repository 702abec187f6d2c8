"""Service layer for Organizador API."""
