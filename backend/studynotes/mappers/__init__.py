"""Converters between ORM rows and domain aggregates."""
