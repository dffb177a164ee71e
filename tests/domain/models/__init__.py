"""Models tests."""
