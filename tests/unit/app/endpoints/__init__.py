"""Unit tests for REST API endpoints."""
