"""Core components of rsakit."""
