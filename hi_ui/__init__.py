"""Command-line presentation layer for hostinfo."""
