"""Main CLI application for installer."""

from __future__ import annotations

import logging
import re
import subprocess  # noqa: S404
import sys

import click
import clicycle
import requests

from cloudflare_installer.cli.display.preview import display_environment, display_plan
from cloudflare_installer.cli.themes import get_installer_theme
from cloudflare_installer.core import CloudflareInstaller
from cloudflare_installer.errors import (
    ConfirmationDeclinedError,
    InstallerError,
    PreconditionError,
)
from cloudflare_installer.messages import PreconditionMessages, StepMessages

logger = logging.getLogger(__name__)

AFFIRMATIVE = re.compile(r"^[Yy]")


def _initialize_cli():
    """Configure theme and print the banner."""
    clicycle.configure(
        app_name="cloudflare-installer", width=100, theme=get_installer_theme()
    )
    clicycle.header(
        "CLOUDFLARE", "Install Cloudflare WARP and cloudflared on Ubuntu."
    )


def is_affirmative(response: str) -> bool:
    """Only answers starting with y or Y approve the run."""
    return bool(AFFIRMATIVE.match(response))


def confirm_plan() -> bool:
    """Ask the operator to approve the previewed changes. Defaults to no."""
    clicycle.info(StepMessages.CONFIRM_INTRO)
    try:
        response = click.prompt(
            StepMessages.CONFIRM_PROMPT,
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
    except click.exceptions.Abort:
        return False
    return is_affirmative(response)


def _report_step(message: str):
    clicycle.info(message)


def run_installer(installer: CloudflareInstaller):
    """Run the installation process.

    Guards run in a fixed order and all of them, including the confirmation,
    finish before the first key is fetched or file written.
    """
    _initialize_cli()

    installer.check_privileges()
    installer.check_os()

    facts = installer.detect_environment()
    display_environment(facts)

    plan = installer.plan(facts)
    display_plan(plan)

    if not confirm_plan():
        raise ConfirmationDeclinedError()

    installer.apply(plan, on_step=_report_step)

    clicycle.success(StepMessages.COMPLETE)
    clicycle.info(StepMessages.USAGE_HINT)


def _exit_status(returncode: int) -> int:
    """Report signal deaths the way a shell does, as 128 + signal number."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def _command_stderr(error: subprocess.CalledProcessError) -> str:
    stderr = error.stderr
    if not stderr:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    return stderr.strip()


def _format_command(cmd) -> str:
    if isinstance(cmd, (list, tuple)):
        return " ".join(str(part) for part in cmd)
    return str(cmd)


def execute(installer: CloudflareInstaller) -> int:
    """Run the installer and translate failures into an exit status."""
    try:
        run_installer(installer)
    except PreconditionError as e:
        clicycle.error(e.message)
        return e.exit_code
    except subprocess.CalledProcessError as e:
        # The failing tool's own status is the installer's status
        clicycle.error(
            f"Command failed (exit {e.returncode}): {_format_command(e.cmd)}"
        )
        stderr = _command_stderr(e)
        if stderr:
            clicycle.code(stderr, language="text", line_numbers=False)
        return _exit_status(e.returncode)
    except requests.RequestException as e:
        clicycle.error(f"Failed to download signing key: {e}")
        return 1
    except (InstallerError, OSError) as e:
        logger.debug("Installation failed", exc_info=True)
        clicycle.error(f"Installation failed: {e}")
        return 1
    except KeyboardInterrupt:
        clicycle.warning(PreconditionMessages.CANCELLED)
        return 1
    return 0


@click.command(name="cloudflare-installer")
def cli():
    """Install Cloudflare WARP and cloudflared with arch-pinned apt sources."""
    sys.exit(execute(CloudflareInstaller.for_host()))
