"""Command-line interface for Nozes."""
