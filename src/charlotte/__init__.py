"""Charlotte - a personal task-tracking assistant."""
