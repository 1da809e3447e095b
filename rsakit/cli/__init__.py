"""Command line interface for rsakit."""
