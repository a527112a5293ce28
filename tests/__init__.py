"""Test suite for the ScriptForward generator.

Test Structure:
- application/: End-to-end generation against headers on disk
- config/: Tests for configuration management
- domain/: Parsing, registry and rendering components
- infrastructure/: Logging helpers
- utils/: Path helpers

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run the end-to-end tests
"""
