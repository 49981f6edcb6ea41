"""HTTP configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudflare_installer import __version__


class HTTPConfig(BaseSettings):
    """HTTP client configurations for signing key downloads."""

    model_config = SettingsConfigDict(env_prefix="CLOUDFLARE_INSTALLER_HTTP_")

    timeout: int = 30
    user_agent: str = f"cloudflare-installer/{__version__}"
