"""Command-line interface for the installer."""
