"""Domain models and enums. Nothing here knows about the CLI, files or logging."""
