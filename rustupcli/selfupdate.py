"""Checking for, fetching and cleaning up after self-updates."""

from __future__ import annotations

import os
import re
import subprocess
import tomllib
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "UPDATE_ROOT",
    "EXE_SUFFIX",
    "ReleaseError",
    "ReleaseInfo",
    "parse_new_rustup_version",
    "parse_release_file",
    "update_download_url",
    "available_update",
    "cleanup_self_updater",
    "rustup_version_of",
]

UPDATE_ROOT = "https://static.rust-lang.org/rustup"
EXE_SUFFIX = ".exe" if os.name == "nt" else ""

_VERSION_RE = re.compile(r"\d+.\d+.\d+[0-9a-zA-Z-]*")


class ReleaseError(ValueError):
    """The release description file could not be understood."""


@dataclass(frozen=True)
class ReleaseInfo:
    """What the release description file announces."""

    schema_version: str
    version: str


def parse_new_rustup_version(text: str) -> str:
    """Pull the version number out of `rustup --version` output."""
    match = _VERSION_RE.search(text)
    return match.group(0) if match else "(unknown)"


def _string_key(table: dict, key: str, label: str) -> str:
    if key not in table:
        raise ReleaseError(f"no {label} key in rustup release file")
    value = table[key]
    if not isinstance(value, str):
        raise ReleaseError(f"invalid {label} key in rustup release file")
    return value


def parse_release_file(text: str) -> ReleaseInfo:
    """Parse the release-stable.toml document."""
    try:
        table = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ReleaseError("unable to parse rustup release file") from exc

    schema = _string_key(table, "schema-version", "schema")
    version = _string_key(table, "version", "version")
    if schema != "1":
        raise ReleaseError(f"unknown schema version '{schema}' in rustup release file")
    return ReleaseInfo(schema_version=schema, version=version)


def update_download_url(
    update_root: str, version: str, triple: str, exe_suffix: str = EXE_SUFFIX
) -> str:
    """The address of the installer for a given version and host triple."""
    return f"{update_root}/archive/{version}/{triple}/rustup-init{exe_suffix}"


def available_update(release_text: str, current_version: str) -> str | None:
    """Return the announced version if it differs from the running one, else None."""
    release = parse_release_file(release_text)
    if release.version == current_version:
        return None
    return release.version


def cleanup_self_updater(
    cargo_home: str | os.PathLike[str], exe_suffix: str = EXE_SUFFIX
) -> bool:
    """Delete a leftover CARGO_HOME/bin/rustup-init; report whether one was there."""
    setup = Path(cargo_home) / "bin" / f"rustup-init{exe_suffix}"
    if not setup.exists():
        return False
    setup.unlink()
    return True


def rustup_version_of(path: str | os.PathLike[str]) -> str | None:
    """Run the program with --version and return its output, or None if that fails."""
    try:
        result = subprocess.run(
            [os.fspath(path), "--version"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None