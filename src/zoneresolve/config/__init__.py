"""Configuration — TOML file discovery, settings, and logging setup."""
