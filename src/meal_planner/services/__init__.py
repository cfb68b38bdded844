"""Application services for meal planning."""
