"""Shell profile and PATH handling for installation and uninstallation."""

from __future__ import annotations

import os
import shutil
from collections.abc import Container, Iterable
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "PathUpdateMethod",
    "canonical_cargo_home",
    "shell_export_string",
    "get_add_path_methods",
    "get_remove_path_methods",
    "add_to_path",
    "remove_from_path",
    "rustc_or_cargo_in_path",
    "remove_cargo_home_contents",
]

_IS_WINDOWS = os.name == "nt"


@dataclass(frozen=True)
class PathUpdateMethod:
    """How PATH gets updated: through a shell profile file, or the Windows registry."""

    rcfile: Path | None = None

    @classmethod
    def windows(cls) -> PathUpdateMethod:
        """The method that edits the user's registry PATH value."""
        return cls()

    @property
    def is_windows(self) -> bool:
        return self.rcfile is None


def canonical_cargo_home(
    cargo_home: str | os.PathLike[str],
    home_dir: str | os.PathLike[str] | None,
    unix: bool = not _IS_WINDOWS,
) -> str:
    """Return CARGO_HOME for display, using $HOME when it is the default location."""
    path = Path(cargo_home)
    default = Path(home_dir if home_dir is not None else ".") / ".cargo"
    if path == default:
        return "$HOME/.cargo" if unix else "%USERPROFILE%\\.cargo"
    return os.fspath(cargo_home)


def shell_export_string(canonical_home: str) -> str:
    """The line that prepends CARGO_HOME/bin to PATH in a shell profile."""
    return f'export PATH="{canonical_home}/bin:$PATH"'


def get_add_path_methods(
    home_dir: str | os.PathLike[str] | None,
    shell: str | None = None,
    zdotdir: str | os.PathLike[str] | None = None,
) -> list[PathUpdateMethod]:
    """Decide which profile files will be amended when adding to PATH."""
    if _IS_WINDOWS:
        return [PathUpdateMethod.windows()]

    home = Path(home_dir) if home_dir is not None else None
    profiles: list[Path] = []
    if home is not None:
        profiles.append(home / ".profile")

    if shell is not None and "zsh" in shell:
        zdot = Path(zdotdir) if zdotdir is not None else home
        if zdot is not None:
            profiles.append(zdot / ".zprofile")

    if home is not None:
        # Creating .bash_profile would stop .profile from being read, so only
        # touch it when it is already there.
        bash_profile = home / ".bash_profile"
        if bash_profile.exists():
            profiles.append(bash_profile)

    return [PathUpdateMethod(p) for p in profiles]


def _read(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def get_remove_path_methods(
    home_dir: str | os.PathLike[str] | None,
    export_string: str,
) -> list[PathUpdateMethod]:
    """Find the existing profile files that hold the PATH export line."""
    if _IS_WINDOWS:
        return [PathUpdateMethod.windows()]
    if home_dir is None:
        return []

    home = Path(home_dir)
    addition = f"\n{export_string}"
    methods = []
    for rcfile in (home / ".profile", home / ".bash_profile"):
        if not rcfile.exists():
            continue
        try:
            contents = _read(rcfile)
        except (OSError, UnicodeDecodeError):
            contents = ""
        if addition in contents:
            methods.append(PathUpdateMethod(rcfile))
    return methods


def _rcfile_of(method: PathUpdateMethod) -> Path:
    if method.rcfile is None:
        raise ValueError("the registry PATH cannot be changed through shell profiles")
    return method.rcfile


def add_to_path(methods: Iterable[PathUpdateMethod], export_string: str) -> None:
    """Append the PATH export line to each profile that does not already have it."""
    addition = f"\n{export_string}"
    for method in methods:
        rcpath = _rcfile_of(method)
        contents = _read(rcpath) if rcpath.exists() else ""
        if addition in contents:
            continue
        try:
            with open(rcpath, "a", encoding="utf-8", newline="") as f:
                f.write(addition)
        except OSError as exc:
            raise OSError(f"could not amend shell profile: '{rcpath}'") from exc


def remove_from_path(methods: Iterable[PathUpdateMethod], export_string: str) -> None:
    """Take the first PATH export line, with its newlines, out of each profile."""
    addition = f"\n{export_string}\n"
    for method in methods:
        rcpath = _rcfile_of(method)
        contents = _read(rcpath)
        idx = contents.find(addition)
        if idx < 0:
            continue
        _write(rcpath, contents[:idx] + contents[idx + len(addition):])


def rustc_or_cargo_in_path(path_value: str | None, exe_suffix: str = "") -> str | None:
    """Return the first PATH entry holding rustc or cargo, skipping .cargo directories."""
    if path_value is None:
        return None
    for entry in path_value.split(os.pathsep):
        directory = Path(entry)
        if ".cargo" in directory.parts:
            continue
        rustc = directory / f"rustc{exe_suffix}"
        cargo = directory / f"cargo{exe_suffix}"
        if rustc.exists() or cargo.exists():
            return entry
    return None


def _remove_entry(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def remove_cargo_home_contents(
    cargo_home: str | os.PathLike[str],
    keep_in_bin: Container[str],
) -> None:
    """Delete everything under CARGO_HOME except the named files in its bin directory."""
    home = Path(cargo_home)
    try:
        entries = list(home.iterdir())
    except OSError as exc:
        raise OSError("failure reading directory") from exc
    for entry in entries:
        if entry.name != "bin":
            _remove_entry(entry)

    bin_dir = home / "bin"
    try:
        bin_entries = list(bin_dir.iterdir())
    except OSError as exc:
        raise OSError("failure reading directory") from exc
    for entry in bin_entries:
        if entry.name not in keep_in_bin:
            _remove_entry(entry)