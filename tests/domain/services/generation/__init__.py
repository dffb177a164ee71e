"""Generation tests."""
