"""Command-line entrypoint, composition root and console slash-commands."""
