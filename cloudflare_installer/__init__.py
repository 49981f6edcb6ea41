"""Cloudflare WARP and cloudflared installer for Ubuntu."""

__version__ = "1.0.0"
