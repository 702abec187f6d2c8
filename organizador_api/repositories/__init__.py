"""Data access for Organizador API."""
