"""Macro-driven meal plan generator."""
