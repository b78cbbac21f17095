"""Command-line entry points: simulate and play."""
