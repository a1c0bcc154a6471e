"""Configuration loading and default values."""
