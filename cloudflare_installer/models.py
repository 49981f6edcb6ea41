"""Values computed once per run and passed between steps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cloudflare_installer.constants import Product


@dataclass(frozen=True)
class EnvironmentFacts:
    """Host facts that repository entries are rendered from."""

    architecture: str
    codename: str


@dataclass(frozen=True)
class RepositoryEntry:
    """A one-line apt source and the list file it belongs in."""

    target_file_path: Path
    line: str

    @property
    def content(self) -> str:
        """File content written for this entry."""
        return f"{self.line}\n"


@dataclass(frozen=True)
class PlannedProduct:
    """A product paired with the entry rendered for it."""

    product: Product
    entry: RepositoryEntry


@dataclass(frozen=True)
class InstallPlan:
    """Everything that will be previewed and then applied."""

    facts: EnvironmentFacts
    items: tuple[PlannedProduct, ...]

    @property
    def entries(self) -> list[RepositoryEntry]:
        return [item.entry for item in self.items]
