"""Test suite for the signature expander.

Test Structure:
- config/: Configuration management
- infrastructure/: Logging setup, timing and progress tracking
- domain/models/: Class specifications and signature models
- domain/services/parsing/: Tokenizer, classifier and declaration parser
- domain/services/generation/: Dispatch table, expansion engine and renderer
- application/: End-to-end expansion through SignatureExpander

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m "not slow"      # Skip slow tests
"""
