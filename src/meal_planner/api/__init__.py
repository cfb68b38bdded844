"""HTTP interface for the meal planner."""
