"""Core: domain models, configuration and the operations themselves."""
