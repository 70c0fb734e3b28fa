"""Shared helpers: logging setup and resource-directory resolution."""
