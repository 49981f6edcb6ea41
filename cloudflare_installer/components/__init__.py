"""Installer components."""

from .renderer import ConfigurationRenderer

__all__ = ["ConfigurationRenderer"]
