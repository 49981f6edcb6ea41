"""Preview display functions."""

import clicycle

from cloudflare_installer.models import EnvironmentFacts, InstallPlan


def display_environment(facts: EnvironmentFacts):
    """Display the detected host facts."""
    clicycle.info(f"Detected architecture: {facts.architecture}")
    clicycle.info(f"Detected Ubuntu codename: {facts.codename}")


def display_plan(plan: InstallPlan):
    """Display every list file and the line that will be written to it."""
    clicycle.section("We will add the following entries to your apt sources")
    for entry in plan.entries:
        clicycle.info(f"File: {entry.target_file_path}")
        clicycle.code(entry.line, language="text", line_numbers=False)
