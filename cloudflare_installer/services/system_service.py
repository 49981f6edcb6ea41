"""Host inspection: privilege, OS family and package environment."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from cloudflare_installer.errors import EnvironmentDetectionError
from cloudflare_installer.models import EnvironmentFacts
from cloudflare_installer.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

ARCHITECTURE_COMMAND = ["dpkg", "--print-architecture"]
CODENAME_COMMAND = ["lsb_release", "-cs"]


class PrivilegeChecker(ABC):
    """Answers whether the process may modify system configuration."""

    @abstractmethod
    def is_privileged(self: PrivilegeChecker) -> bool:
        """Return True when running with elevated privilege."""


class RootPrivilegeChecker(PrivilegeChecker):
    """Privilege means an effective uid of 0."""

    def is_privileged(self: RootPrivilegeChecker) -> bool:
        return os.geteuid() == 0


class OsIdentifier(ABC):
    """Answers whether the host belongs to a given OS family."""

    @abstractmethod
    def is_family(self: OsIdentifier, family: str) -> bool:
        """Return True when the host identifies as ``family``."""


class OsReleaseIdentifier(OsIdentifier):
    """Looks for the family name anywhere in os-release, ignoring case."""

    def __init__(self: OsReleaseIdentifier, path: Path) -> None:
        self.path = path

    def is_family(self: OsReleaseIdentifier, family: str) -> bool:
        try:
            content = self.path.read_text()
        except FileNotFoundError:
            logger.debug("%s not found", self.path)
            return False
        return family.lower() in content.lower()


class EnvironmentDetector(ABC):
    """Source of the facts repository entries are rendered from."""

    @abstractmethod
    def detect(self: EnvironmentDetector) -> EnvironmentFacts:
        """Return the host architecture and release codename."""


class DpkgEnvironmentDetector(EnvironmentDetector):
    """Asks dpkg for the architecture and lsb_release for the codename."""

    def __init__(self: DpkgEnvironmentDetector, runner: ProcessRunner | None = None):
        self.runner = runner or ProcessRunner()

    def detect(self: DpkgEnvironmentDetector) -> EnvironmentFacts:
        architecture = self._query(ARCHITECTURE_COMMAND)
        codename = self._query(CODENAME_COMMAND)
        logger.debug("Detected architecture=%s codename=%s", architecture, codename)
        return EnvironmentFacts(architecture=architecture, codename=codename)

    def _query(self: DpkgEnvironmentDetector, cmd: list[str]) -> str:
        value = self.runner.output(cmd)
        if not value:
            raise EnvironmentDetectionError(cmd)
        return value
