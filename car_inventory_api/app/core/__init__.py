"""Configuration and logging setup shared by the application."""
