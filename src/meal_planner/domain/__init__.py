"""Domain models for meal planning."""
