"""Adapters: JSON files in and out of the domain models."""
