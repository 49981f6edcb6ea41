"""Signing key retrieval and keyring installation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import requests

from cloudflare_installer.config import HTTPConfig
from cloudflare_installer.utils.files import atomic_write
from cloudflare_installer.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

DEARMOR_COMMAND = ["gpg", "--dearmor"]


class KeyImporter(ABC):
    """Installs a repository signing key as a binary keyring."""

    @abstractmethod
    def import_key(self: KeyImporter, key_url: str, keyring_path: Path) -> None:
        """Fetch the key at ``key_url`` and overwrite ``keyring_path`` with it."""


class GpgKeyImporter(KeyImporter):
    """Downloads an armored key and converts it with ``gpg --dearmor``."""

    def __init__(
        self: GpgKeyImporter,
        http_config: HTTPConfig,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.http_config = http_config
        self.runner = runner or ProcessRunner()

    def import_key(self: GpgKeyImporter, key_url: str, keyring_path: Path) -> None:
        armored = self.fetch(key_url)
        keyring = self.dearmor(armored)
        atomic_write(keyring_path, keyring)
        logger.info("Installed keyring %s from %s", keyring_path, key_url)

    def fetch(self: GpgKeyImporter, key_url: str) -> bytes:
        """Download the armored key; HTTP errors are raised, not retried."""
        logger.debug("Fetching signing key from %s", key_url)
        response = requests.get(
            key_url,
            headers={"User-Agent": self.http_config.user_agent},
            timeout=self.http_config.timeout,
        )
        response.raise_for_status()
        return response.content

    def dearmor(self: GpgKeyImporter, armored: bytes) -> bytes:
        """Convert an ASCII-armored key to gpg's binary keyring format."""
        result = self.runner.run(DEARMOR_COMMAND, input=armored, capture_output=True)
        return result.stdout
