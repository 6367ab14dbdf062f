"""Command error handling."""
