"""Command-line interface for CHECKEDOPS."""
