"""Runners for the service."""
