"""Shared helpers: console output, filesystem and process capabilities, config."""
