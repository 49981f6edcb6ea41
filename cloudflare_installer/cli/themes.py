"""Terminal themes for installer."""

from clicycle import Theme, Typography


def get_installer_theme():
    """Get a coloured theme for installer progress and errors."""
    return Theme(
        typography=Typography(
            header_style="bold blue",
            section_style="bold yellow",
            info_style="default",
            success_style="bold green",
            error_style="bold red",
            warning_style="bold yellow",
            muted_style="dim",
            value_style="bold green",
        ),
        width=100,
    )
