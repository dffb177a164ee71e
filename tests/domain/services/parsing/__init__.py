"""Parsing tests."""
