"""Payment planner package."""
