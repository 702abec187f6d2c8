"""Database models for Organizador API."""
