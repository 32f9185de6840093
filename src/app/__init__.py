"""REST API service implementation."""
