"""Exception classes for the Cloudflare installer."""

from __future__ import annotations

from cloudflare_installer.messages import PreconditionMessages


class InstallerError(Exception):
    """Base exception for all installer errors."""


class PreconditionError(InstallerError):
    """Raised when the run cannot start or continue past a guard."""

    exit_code = 1

    def __init__(self: PreconditionError, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotRootError(PreconditionError):
    """Raised when the installer is not running with root privilege."""

    def __init__(self: NotRootError) -> None:
        super().__init__(PreconditionMessages.NOT_ROOT)


class UnsupportedOSError(PreconditionError):
    """Raised when the host is not an Ubuntu system."""

    def __init__(self: UnsupportedOSError) -> None:
        super().__init__(PreconditionMessages.UNSUPPORTED_OS)


class ConfirmationDeclinedError(PreconditionError):
    """Raised when the operator does not approve the changes."""

    def __init__(self: ConfirmationDeclinedError) -> None:
        super().__init__(PreconditionMessages.DECLINED)


class EnvironmentDetectionError(InstallerError):
    """Raised when a detection command returns no usable value."""

    def __init__(self: EnvironmentDetectionError, command: list[str]) -> None:
        self.command = command
        super().__init__(f"{' '.join(command)} returned no output")
