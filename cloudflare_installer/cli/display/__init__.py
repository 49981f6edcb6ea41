"""Display helpers for the installer CLI."""
