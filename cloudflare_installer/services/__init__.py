"""Capabilities the installer uses to inspect and change the host."""

from .key_service import GpgKeyImporter, KeyImporter
from .package_service import AptPackageManager, PackageManager
from .sources_service import FileSourcesWriter, SourcesWriter
from .system_service import (
    DpkgEnvironmentDetector,
    EnvironmentDetector,
    OsIdentifier,
    OsReleaseIdentifier,
    PrivilegeChecker,
    RootPrivilegeChecker,
)

__all__ = [
    "AptPackageManager",
    "DpkgEnvironmentDetector",
    "EnvironmentDetector",
    "FileSourcesWriter",
    "GpgKeyImporter",
    "KeyImporter",
    "OsIdentifier",
    "OsReleaseIdentifier",
    "PackageManager",
    "PrivilegeChecker",
    "RootPrivilegeChecker",
    "SourcesWriter",
]
