"""Command-line entrypoints. Not imported by the top-level package."""
