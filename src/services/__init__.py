"""Business logic of the service."""
