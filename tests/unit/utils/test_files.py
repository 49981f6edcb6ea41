"""Tests for file system utilities."""

import stat
from unittest.mock import patch

import pytest

from cloudflare_installer.utils.files import atomic_write


def test_atomic_write_creates_parent_directories(tmp_path):
    target = tmp_path / "etc" / "apt" / "sources.list.d" / "cloudflared.list"

    atomic_write(target, b"deb example\n")

    assert target.read_bytes() == b"deb example\n"


def test_atomic_write_overwrites_instead_of_appending(tmp_path):
    target = tmp_path / "cloudflared.list"
    target.write_text("old line\nanother old line\n")

    atomic_write(target, b"new line\n")

    assert target.read_bytes() == b"new line\n"


def test_atomic_write_sets_world_readable_mode(tmp_path):
    target = tmp_path / "cloudflare-main.gpg"

    atomic_write(target, b"\x99keyring")

    assert stat.S_IMODE(target.stat().st_mode) == 0o644


def test_atomic_write_leaves_no_temp_files(tmp_path):
    target = tmp_path / "cloudflared.list"

    atomic_write(target, b"one\n")
    atomic_write(target, b"two\n")

    assert [p.name for p in tmp_path.iterdir()] == ["cloudflared.list"]


def test_atomic_write_failure_keeps_previous_content(tmp_path):
    """A failed replace neither corrupts the target nor leaves a temp file."""
    target = tmp_path / "cloudflared.list"
    target.write_bytes(b"previous\n")

    with (
        patch("pathlib.Path.replace", side_effect=OSError("disk full")),
        pytest.raises(OSError, match="disk full"),
    ):
        atomic_write(target, b"next\n")

    assert target.read_bytes() == b"previous\n"
    assert [p.name for p in tmp_path.iterdir()] == ["cloudflared.list"]
