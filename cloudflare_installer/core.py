"""Core installer functionality."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cloudflare_installer.components.renderer import ConfigurationRenderer
from cloudflare_installer.config import Config, get_config
from cloudflare_installer.constants import CONFIG, InstallerConfig
from cloudflare_installer.errors import NotRootError, UnsupportedOSError
from cloudflare_installer.messages import StepMessages
from cloudflare_installer.models import EnvironmentFacts, InstallPlan, PlannedProduct
from cloudflare_installer.services import (
    AptPackageManager,
    DpkgEnvironmentDetector,
    EnvironmentDetector,
    FileSourcesWriter,
    GpgKeyImporter,
    KeyImporter,
    OsIdentifier,
    OsReleaseIdentifier,
    PackageManager,
    PrivilegeChecker,
    RootPrivilegeChecker,
    SourcesWriter,
)

logger = logging.getLogger(__name__)


class CloudflareInstaller:
    """Main installer orchestrator - handles business logic only.

    Every host interaction goes through an injected capability, so the
    sequence can be exercised against fakes. Output and prompting belong to
    the CLI layer; progress is reported through ``on_step``.
    """

    def __init__(
        self,
        privilege_checker: PrivilegeChecker,
        os_identifier: OsIdentifier,
        environment_detector: EnvironmentDetector,
        key_importer: KeyImporter,
        sources_writer: SourcesWriter,
        package_manager: PackageManager,
        installer_config: InstallerConfig = CONFIG,
        renderer: ConfigurationRenderer | None = None,
    ):
        self.privilege_checker = privilege_checker
        self.os_identifier = os_identifier
        self.environment_detector = environment_detector
        self.key_importer = key_importer
        self.sources_writer = sources_writer
        self.package_manager = package_manager
        self.installer_config = installer_config
        self.renderer = renderer or ConfigurationRenderer()

    @classmethod
    def for_host(
        cls, config: Config | None = None, installer_config: InstallerConfig = CONFIG
    ) -> CloudflareInstaller:
        """Build an installer wired to the real system tools."""
        config = config or get_config()
        return cls(
            privilege_checker=RootPrivilegeChecker(),
            os_identifier=OsReleaseIdentifier(installer_config.os_release_path),
            environment_detector=DpkgEnvironmentDetector(),
            key_importer=GpgKeyImporter(config.http),
            sources_writer=FileSourcesWriter(),
            package_manager=AptPackageManager(),
            installer_config=installer_config,
        )

    def check_privileges(self) -> None:
        """Raise NotRootError unless running with elevated privilege."""
        if not self.privilege_checker.is_privileged():
            raise NotRootError()

    def check_os(self) -> None:
        """Raise UnsupportedOSError unless the host is the supported OS."""
        if not self.os_identifier.is_family(self.installer_config.supported_os):
            raise UnsupportedOSError()

    def detect_environment(self) -> EnvironmentFacts:
        """Detect architecture and codename once for the whole run."""
        return self.environment_detector.detect()

    def plan(self, facts: EnvironmentFacts) -> InstallPlan:
        """Render an entry for every product in the catalogue."""
        products = self.installer_config.products
        entries = self.renderer.render_all(facts, products)
        items = tuple(
            PlannedProduct(product=product, entry=entry)
            for product, entry in zip(products, entries, strict=True)
        )
        return InstallPlan(facts=facts, items=items)

    def apply(
        self, plan: InstallPlan, on_step: Callable[[str], None] | None = None
    ) -> None:
        """Write keyrings and list files, then update and install packages.

        Each step overwrites unconditionally and the first failure propagates;
        files written before it stay in place.
        """
        report = on_step or (lambda message: None)

        for item in plan.items:
            product = item.product
            report(StepMessages.IMPORT_KEY.format(display_name=product.display_name))
            self.key_importer.import_key(str(product.key_url), product.keyring_path)

            report(
                StepMessages.WRITE_SOURCES.format(
                    display_name=product.display_name,
                    path=item.entry.target_file_path,
                )
            )
            self.sources_writer.write(item.entry)

        report(StepMessages.UPDATE)
        self.package_manager.update()

        for package in self.installer_config.install_order:
            report(StepMessages.INSTALL.format(package=package))
            self.package_manager.install(package)

        logger.info("Installed %s", ", ".join(self.installer_config.install_order))
