"""Signature tests."""
