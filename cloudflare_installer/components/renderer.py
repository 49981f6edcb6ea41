"""Rendering of apt repository entries."""

from __future__ import annotations

from collections.abc import Iterable

from cloudflare_installer.constants import Product
from cloudflare_installer.models import EnvironmentFacts, RepositoryEntry


class ConfigurationRenderer:
    """Render apt source lines pinned to the host architecture.

    Upstream instructions omit ``arch=``, so on multi-arch hosts apt also
    requests i386 indexes that these repositories do not publish. Every line
    rendered here carries the detected architecture instead.

    Architecture and codename are used verbatim; a codename the upstream
    repository does not publish yet still renders a well-formed line.
    """

    def render(self, facts: EnvironmentFacts, product: Product) -> RepositoryEntry:
        """Render the entry for one product."""
        options = f"arch={facts.architecture} signed-by={product.keyring_path}"
        line = (
            f"deb [{options}] {product.repo_url} {facts.codename} {product.component}"
        )
        return RepositoryEntry(target_file_path=product.sources_path, line=line)

    def render_all(
        self, facts: EnvironmentFacts, products: Iterable[Product]
    ) -> list[RepositoryEntry]:
        """Render one entry per product, in order."""
        return [self.render(facts, product) for product in products]
