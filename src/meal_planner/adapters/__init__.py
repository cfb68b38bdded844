"""Adapters for external data sources."""
