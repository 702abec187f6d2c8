"""Core modules for Organizador API."""
