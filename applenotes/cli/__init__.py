"""Command line interface for applenotes."""
