"""Output formatting for the CLI."""

from nozes.output.formatter import OutputFormatter, get_formatter

__all__ = ["OutputFormatter", "get_formatter"]
