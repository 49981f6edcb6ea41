"""Centralized messages for the Cloudflare installer.

Operator-facing text lives here so the CLI and the tests agree on it.
"""


class PreconditionMessages:
    """Messages for guards that stop the run."""

    NOT_ROOT = "This script must be run as root. Please use sudo."
    UNSUPPORTED_OS = "This script is intended for Ubuntu systems only."
    DECLINED = "Aborting installation."
    CANCELLED = "Installation cancelled by user."


class StepMessages:
    """Progress messages for the apply sequence."""

    IMPORT_KEY = "Downloading and installing {display_name} GPG key..."
    WRITE_SOURCES = "Adding {display_name} repo to {path}..."
    UPDATE = "Updating package lists..."
    INSTALL = "Installing {package}..."
    CONFIRM_INTRO = (
        "Please confirm that you want to proceed with adding these "
        "repositories and installing the Cloudflare packages."
    )
    CONFIRM_PROMPT = (
        "Proceed with adding these repos and installing Cloudflare packages? [y/N]"
    )
    COMPLETE = "Installation complete!"
    USAGE_HINT = "You can now use cloudflared and/or WARP as needed."
