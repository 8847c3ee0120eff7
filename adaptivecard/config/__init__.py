"""Configuration and logging helpers for the adaptivecard package."""
