"""Core module - country catalog, locale resolution and models."""
