"""Installer constants and product catalogue."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, HttpUrl


class Product(BaseModel):
    """One upstream product: its signing key, repository and package."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    package: str

    # Signing key
    key_url: HttpUrl
    keyring_path: Path

    # Repository
    repo_url: str
    sources_path: Path
    component: str = "main"


WARP = Product(
    name="warp",
    display_name="Cloudflare WARP",
    package="cloudflare-warp",
    key_url="https://pkg.cloudflareclient.com/pubkey.gpg",
    keyring_path=Path("/usr/share/keyrings/cloudflare-warp-archive-keyring.gpg"),
    repo_url="https://pkg.cloudflareclient.com/",
    sources_path=Path("/etc/apt/sources.list.d/cloudflare-client.list"),
)

CLOUDFLARED = Product(
    name="cloudflared",
    display_name="cloudflared",
    package="cloudflared",
    key_url="https://pkg.cloudflare.com/cloudflare-main.gpg",
    keyring_path=Path("/usr/share/keyrings/cloudflare-main.gpg"),
    repo_url="https://pkg.cloudflare.com/cloudflared",
    sources_path=Path("/etc/apt/sources.list.d/cloudflared.list"),
)


class InstallerConfig(BaseModel):
    """Installer configuration constants."""

    # Keys and list files are applied in this order
    products: list[Product] = [WARP, CLOUDFLARED]

    # Packages are installed in this order
    install_order: list[str] = ["cloudflared", "cloudflare-warp"]

    # Host checks
    os_release_path: Path = Path("/etc/os-release")
    supported_os: str = "ubuntu"


# Global instance
CONFIG = InstallerConfig()
