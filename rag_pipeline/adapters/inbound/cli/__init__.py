"""Command-line adapter (typer)."""
