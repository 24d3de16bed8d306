"""Deterministic demo-data seeding for the Acme compliance tenant."""

__version__ = "0.1.0"
