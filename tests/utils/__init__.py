"""Path utility tests."""
