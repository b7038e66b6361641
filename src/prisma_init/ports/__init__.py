"""Ports consumed by the endpoint dialog."""
