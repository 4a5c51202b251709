"""Pydantic schemas for the tracker API and house model documents."""
