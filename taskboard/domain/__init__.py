"""Domain rules for tasks and projects (field specs, validation, derived views)."""
