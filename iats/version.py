"""Firmware name and version string."""

from __future__ import annotations

FIRMWARE_NAME = "iAts"


def software_version(version: str | None = None, git_revision: str | None = None) -> str:
    """Version string built from a release version and/or a revision id."""
    if version and git_revision:
        return f"{version} ({git_revision})"
    if version:
        return version
    if git_revision:
        return git_revision
    return "Unknown"