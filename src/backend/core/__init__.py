"""Core configuration and application lifecycle."""
