"""Chat message resolution."""
