"""Scripts tests."""
