"""Command-line entrypoint, composition root and numbered menu commands."""
