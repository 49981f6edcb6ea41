"""Package manager invocation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from cloudflare_installer.utils.process import ProcessRunner

logger = logging.getLogger(__name__)


class PackageManager(ABC):
    """Refreshes package indexes and installs packages without prompting."""

    @abstractmethod
    def update(self: PackageManager) -> None:
        """Refresh the package index."""

    @abstractmethod
    def install(self: PackageManager, package: str) -> None:
        """Install ``package`` with consent assumed."""


class AptPackageManager(PackageManager):
    """apt-get, with its output left on the terminal."""

    def __init__(self: AptPackageManager, runner: ProcessRunner | None = None):
        self.runner = runner or ProcessRunner()

    def update(self: AptPackageManager) -> None:
        self.runner.run(["apt-get", "update"])

    def install(self: AptPackageManager, package: str) -> None:
        logger.info("Installing package %s", package)
        self.runner.run(["apt-get", "install", "-y", package])
