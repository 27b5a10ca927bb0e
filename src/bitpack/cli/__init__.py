"""Command-line interface for bitpack."""
