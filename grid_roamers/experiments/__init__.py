"""Command-line entrypoints for headless runs."""
