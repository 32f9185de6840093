"""Runners tests."""
