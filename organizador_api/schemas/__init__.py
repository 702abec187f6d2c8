"""Pydantic schemas for Organizador API."""
