"""HTTP API module."""
