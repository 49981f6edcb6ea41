"""Pytest configuration for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from cloudflare_installer.constants import CLOUDFLARED, WARP, InstallerConfig
from cloudflare_installer.core import CloudflareInstaller
from cloudflare_installer.models import EnvironmentFacts
from cloudflare_installer.services import (
    EnvironmentDetector,
    FileSourcesWriter,
    KeyImporter,
    OsIdentifier,
    PackageManager,
    PrivilegeChecker,
    SourcesWriter,
)
from cloudflare_installer.utils.files import atomic_write

FAKE_KEYRING = b"\x99\x01\x0dfake-binary-keyring"


class CallLog(list):
    """Ordered record of capability calls shared by all fakes."""

    def names(self) -> list[str]:
        return [call[0] for call in self]


class FakePrivilegeChecker(PrivilegeChecker):
    def __init__(self, calls: CallLog, privileged: bool = True):
        self.calls = calls
        self.privileged = privileged

    def is_privileged(self) -> bool:
        self.calls.append(("is_privileged",))
        return self.privileged


class FakeOsIdentifier(OsIdentifier):
    def __init__(self, calls: CallLog, family: str = "ubuntu"):
        self.calls = calls
        self.family = family

    def is_family(self, family: str) -> bool:
        self.calls.append(("is_family", family))
        return family == self.family


class FakeEnvironmentDetector(EnvironmentDetector):
    def __init__(self, calls: CallLog, facts: EnvironmentFacts):
        self.calls = calls
        self.facts = facts

    def detect(self) -> EnvironmentFacts:
        self.calls.append(("detect",))
        return self.facts


class FakeKeyImporter(KeyImporter):
    """Records the fetch and writes a fixed keyring."""

    def __init__(self, calls: CallLog):
        self.calls = calls

    def import_key(self, key_url: str, keyring_path: Path) -> None:
        self.calls.append(("import_key", key_url, keyring_path))
        atomic_write(keyring_path, FAKE_KEYRING)


class RecordingSourcesWriter(SourcesWriter):
    """Records the write and delegates to the real file writer."""

    def __init__(self, calls: CallLog):
        self.calls = calls
        self.writer = FileSourcesWriter()

    def write(self, entry) -> None:
        self.calls.append(("write_sources", entry.target_file_path))
        self.writer.write(entry)


class FakePackageManager(PackageManager):
    def __init__(self, calls: CallLog):
        self.calls = calls

    def update(self) -> None:
        self.calls.append(("update",))

    def install(self, package: str) -> None:
        self.calls.append(("install", package))


@pytest.fixture
def facts() -> EnvironmentFacts:
    """Facts for an amd64 noble host."""
    return EnvironmentFacts(architecture="amd64", codename="noble")


@pytest.fixture
def installer_config(tmp_path: Path) -> InstallerConfig:
    """The real catalogue with every file redirected under tmp_path."""

    def relocate(product):
        return product.model_copy(
            update={
                "keyring_path": tmp_path / "keyrings" / product.keyring_path.name,
                "sources_path": tmp_path / "sources" / product.sources_path.name,
            }
        )

    return InstallerConfig(products=[relocate(WARP), relocate(CLOUDFLARED)])


@pytest.fixture
def calls() -> CallLog:
    return CallLog()


@pytest.fixture
def fake_keyring() -> bytes:
    """Bytes every fake key import writes."""
    return FAKE_KEYRING


@pytest.fixture
def make_installer(calls, facts, installer_config):
    """Factory for an installer built entirely from fakes."""

    def factory(
        privileged: bool = True,
        family: str = "ubuntu",
        host_facts: EnvironmentFacts | None = None,
    ) -> CloudflareInstaller:
        return CloudflareInstaller(
            privilege_checker=FakePrivilegeChecker(calls, privileged),
            os_identifier=FakeOsIdentifier(calls, family),
            environment_detector=FakeEnvironmentDetector(calls, host_facts or facts),
            key_importer=FakeKeyImporter(calls),
            sources_writer=RecordingSourcesWriter(calls),
            package_manager=FakePackageManager(calls),
            installer_config=installer_config,
        )

    return factory
