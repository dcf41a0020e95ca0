"""Information about the build that is running."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildInfo:
    """Branch the build is based on and its commit hash (blank when built locally)."""

    branch: str = ""
    commit: str = ""


_current = BuildInfo()


def set_build_info(branch: str, commit: str) -> BuildInfo:
    """Record the running build's branch and commit."""
    global _current
    _current = BuildInfo(branch=branch, commit=commit)
    return _current


def current_build_info() -> BuildInfo:
    return _current