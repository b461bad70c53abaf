"""API gateway service."""
