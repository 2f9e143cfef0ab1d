"""Command line interface for monokit."""
