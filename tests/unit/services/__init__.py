"""Services tests."""
