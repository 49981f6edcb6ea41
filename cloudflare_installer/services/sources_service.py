"""Repository list file writing."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from cloudflare_installer.models import RepositoryEntry
from cloudflare_installer.utils.files import atomic_write

logger = logging.getLogger(__name__)


class SourcesWriter(ABC):
    """Puts a rendered entry in its list file."""

    @abstractmethod
    def write(self: SourcesWriter, entry: RepositoryEntry) -> None:
        """Overwrite the entry's target file with its content."""


class FileSourcesWriter(SourcesWriter):
    """Writes list files directly to the file system."""

    def write(self: FileSourcesWriter, entry: RepositoryEntry) -> None:
        atomic_write(entry.target_file_path, entry.content.encode())
        logger.info("Wrote %s", entry.target_file_path)
