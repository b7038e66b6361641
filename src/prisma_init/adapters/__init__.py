"""Default adapters for the endpoint dialog ports."""
