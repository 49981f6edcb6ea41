"""Installer utility functions."""

from cloudflare_installer.utils.files import atomic_write
from cloudflare_installer.utils.process import ProcessRunner

__all__ = ["ProcessRunner", "atomic_write"]
