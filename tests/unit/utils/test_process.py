"""Tests for the subprocess runner."""

import subprocess
from unittest.mock import patch

import pytest

from cloudflare_installer.utils.process import ProcessRunner


def test_run_checks_by_default():
    with patch("cloudflare_installer.utils.process.subprocess.run") as mock_run:
        ProcessRunner().run(["apt-get", "update"])

    mock_run.assert_called_once_with(
        ["apt-get", "update"], cwd=None, capture_output=False, check=True
    )


def test_output_strips_trailing_newline():
    completed = subprocess.CompletedProcess(["dpkg"], 0, stdout="amd64\n")
    with patch(
        "cloudflare_installer.utils.process.subprocess.run", return_value=completed
    ) as mock_run:
        assert ProcessRunner().output(["dpkg", "--print-architecture"]) == "amd64"

    mock_run.assert_called_once_with(
        ["dpkg", "--print-architecture"],
        cwd=None,
        capture_output=True,
        check=True,
        text=True,
    )


def test_failures_propagate():
    error = subprocess.CalledProcessError(100, ["apt-get", "update"])
    with (
        patch("cloudflare_installer.utils.process.subprocess.run", side_effect=error),
        pytest.raises(subprocess.CalledProcessError),
    ):
        ProcessRunner().run(["apt-get", "update"])
