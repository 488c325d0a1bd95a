"""dialogclick command-line interface."""
