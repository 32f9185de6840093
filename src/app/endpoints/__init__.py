"""Handlers for REST API endpoints."""
