"""The `rustup` command line: argument grammar and small decision helpers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Mapping, Sequence

from .completions import SHELLS, CompletionCommand
from .docs import DOC_PAGES

__all__ = [
    "CommandError",
    "build_parser",
    "parse_args",
    "check_target_all",
    "bare_triple_candidates",
]

TOOLCHAIN_ARG_HELP = "Toolchain name, such as 'stable', 'nightly', or '1.8.0'"

Triple = tuple[str | None, str | None, str | None]


class CommandError(Exception):
    """A command was given arguments it cannot act on."""


def _sub(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str | None,
    action: tuple[str, ...],
    aliases: Sequence[str] = (),
    description: str | None = None,
) -> argparse.ArgumentParser:
    kwargs = {"aliases": list(aliases), "description": description or help_text}
    if help_text is not None:
        kwargs["help"] = help_text
    parser = subparsers.add_parser(name, **kwargs)
    parser.set_defaults(action=action)
    return parser


def _toolchain_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--toolchain", help=TOOLCHAIN_ARG_HELP)


def _add_toolchain_group(top: argparse._SubParsersAction) -> None:
    toolchain = _sub(top, "toolchain", "Modify or query the installed toolchains", ("toolchain",))
    subs = toolchain.add_subparsers(dest="subcommand", required=True)
    _sub(subs, "list", "List installed toolchains", ("toolchain", "list"))

    install = _sub(
        subs, "install", "Install or update a given toolchain",
        ("toolchain", "install"), aliases=("update", "add"),
    )
    install.add_argument("toolchain", nargs="+", help=TOOLCHAIN_ARG_HELP)
    install.add_argument(
        "--no-self-update", action="store_true",
        help="Don't perform self update when running the `rustup toolchain install` command",
    )

    uninstall = _sub(
        subs, "uninstall", "Uninstall a toolchain",
        ("toolchain", "uninstall"), aliases=("remove",),
    )
    uninstall.add_argument("toolchain", nargs="+", help=TOOLCHAIN_ARG_HELP)

    link = _sub(
        subs, "link", "Create a custom toolchain by symlinking to a directory",
        ("toolchain", "link"),
    )
    link.add_argument("toolchain", help=TOOLCHAIN_ARG_HELP)
    link.add_argument("path")


def _add_target_group(top: argparse._SubParsersAction) -> None:
    target = _sub(top, "target", "Modify a toolchain's supported targets", ("target",))
    subs = target.add_subparsers(dest="subcommand", required=True)

    listing = _sub(subs, "list", "List installed and available targets", ("target", "list"))
    listing.add_argument("--installed", action="store_true", help="List only installed targets")
    _toolchain_option(listing)

    add = _sub(
        subs, "add", "Add a target to a Rust toolchain",
        ("target", "add"), aliases=("install",),
    )
    add.add_argument(
        "target", nargs="+",
        help='List of targets to install; "all" installs all available targets',
    )
    _toolchain_option(add)

    remove = _sub(
        subs, "remove", "Remove a target from a Rust toolchain",
        ("target", "remove"), aliases=("uninstall",),
    )
    remove.add_argument("target", nargs="+")
    _toolchain_option(remove)


def _add_component_group(top: argparse._SubParsersAction) -> None:
    component = _sub(
        top, "component", "Modify a toolchain's installed components", ("component",)
    )
    subs = component.add_subparsers(dest="subcommand", required=True)

    listing = _sub(
        subs, "list", "List installed and available components", ("component", "list")
    )
    listing.add_argument(
        "--installed", action="store_true", help="List only installed components"
    )
    _toolchain_option(listing)

    for name, help_text in (
        ("add", "Add a component to a Rust toolchain"),
        ("remove", "Remove a component from a Rust toolchain"),
    ):
        parser = _sub(subs, name, help_text, ("component", name))
        parser.add_argument("component", nargs="+")
        _toolchain_option(parser)
        parser.add_argument("--target")


def _add_override_group(top: argparse._SubParsersAction) -> None:
    override = _sub(top, "override", "Modify directory toolchain overrides", ("override",))
    subs = override.add_subparsers(dest="subcommand", required=True)
    _sub(subs, "list", "List directory toolchain overrides", ("override", "list"))

    set_ = _sub(
        subs, "set", "Set the override toolchain for a directory",
        ("override", "set"), aliases=("add",),
    )
    set_.add_argument("toolchain", help=TOOLCHAIN_ARG_HELP)
    set_.add_argument("--path", help="Path to the directory")

    unset = _sub(
        subs, "unset", "Remove the override toolchain for a directory",
        ("override", "unset"), aliases=("remove",),
    )
    unset.add_argument("--path", help="Path to the directory")
    unset.add_argument(
        "--nonexistent", action="store_true",
        help="Remove override toolchain for all nonexistent directories",
    )


def _add_update_like(
    top: argparse._SubParsersAction,
    name: str,
    help_text: str | None,
    description: str,
    required: bool,
) -> None:
    parser = _sub(top, name, help_text, (name,), description=description)
    parser.add_argument(
        "toolchain", nargs="+" if required else "*", help=TOOLCHAIN_ARG_HELP
    )
    parser.add_argument(
        "--no-self-update", action="store_true",
        help=f"Don't perform self update when running the `rustup {name}` command",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Force an update, even if some components are missing",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the full `rustup` argument grammar."""
    parser = argparse.ArgumentParser(prog="rustup", description="The Rust toolchain installer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    top = parser.add_subparsers(dest="command", required=True)

    # Not for users, only CI.
    _sub(top, "dump-testament", None, ("dump-testament",),
         description="Dump information about the build")

    show = _sub(top, "show", "Show the active and installed toolchains", ("show",))
    show_subs = show.add_subparsers(dest="subcommand")
    _sub(show_subs, "active-toolchain", "Show the active toolchain", ("show", "active-toolchain"))
    _sub(show_subs, "home", "Display the computed value of RUSTUP_HOME", ("show", "home"))

    # Hidden synonyms for `toolchain install` and `toolchain uninstall`.
    _add_update_like(top, "install", None, "Update Rust toolchains", required=True)
    uninstall = _sub(top, "uninstall", None, ("uninstall",),
                     description="Uninstall Rust toolchains")
    uninstall.add_argument("toolchain", nargs="+", help=TOOLCHAIN_ARG_HELP)

    _add_update_like(
        top, "update", "Update Rust toolchains and rustup",
        "Update Rust toolchains and rustup", required=False,
    )

    default = _sub(top, "default", "Set the default toolchain", ("default",))
    default.add_argument("toolchain", nargs="?", help=TOOLCHAIN_ARG_HELP)

    _add_toolchain_group(top)
    _add_target_group(top)
    _add_component_group(top)
    _add_override_group(top)

    run = _sub(
        top, "run",
        "Run a command with an environment configured for a given toolchain", ("run",),
    )
    run.add_argument(
        "--install", action="store_true", help="Install the requested toolchain if needed"
    )
    run.add_argument("toolchain", help=TOOLCHAIN_ARG_HELP)
    run.add_argument("run_command", metavar="command", nargs=argparse.REMAINDER)

    which = _sub(top, "which", "Display which binary will be run for a given command", ("which",))
    which.add_argument("binary", metavar="command")

    doc = _sub(
        top, "doc", "Open the documentation for the current toolchain", ("doc",),
        aliases=("docs",),
    )
    doc.add_argument(
        "--path", action="store_true", help="Only print the path to the documentation"
    )
    pages = doc.add_mutually_exclusive_group()
    for page in DOC_PAGES:
        pages.add_argument(
            f"--{page.name}", dest="page", action="store_const", const=page.name,
            help=page.help,
        )
    _toolchain_option(doc)

    if os.name != "nt":
        man = _sub(top, "man", "View the man page for a given command", ("man",))
        man.add_argument("man_command", metavar="command")
        _toolchain_option(man)

    self_ = _sub(top, "self", "Modify the rustup installation", ("self",))
    self_subs = self_.add_subparsers(dest="subcommand", required=True)
    _sub(self_subs, "update", "Download and install updates to rustup", ("self", "update"))
    self_uninstall = _sub(self_subs, "uninstall", "Uninstall rustup.", ("self", "uninstall"))
    self_uninstall.add_argument("-y", dest="no_prompt", action="store_true")
    _sub(self_subs, "upgrade-data", "Upgrade the internal data format.",
         ("self", "upgrade-data"))

    set_ = _sub(top, "set", "Alter rustup settings", ("set",))
    set_subs = set_.add_subparsers(dest="subcommand", required=True)
    default_host = _sub(
        set_subs, "default-host",
        "The triple used to identify toolchains when not specified", ("set", "default-host"),
    )
    default_host.add_argument("host_triple")

    completions = _sub(
        top, "completions", "Generate tab-completion scripts for your shell", ("completions",)
    )
    completions.add_argument("shell", nargs="?", choices=SHELLS)
    completions.add_argument(
        "completion_command", metavar="command", nargs="?",
        choices=CompletionCommand.variants(), default=CompletionCommand.RUSTUP.value,
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse a `rustup` command line; invalid input exits with a usage message."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.action == ("run",) and not args.run_command:
        parser.error("the following arguments are required: command")
    if args.action == ("completions",):
        args.completion_command = CompletionCommand.parse(args.completion_command)
    return args


def check_target_all(targets: Sequence[str]) -> bool:
    """Tell whether every available target was asked for.

    "all" may only be given on its own; CommandError is raised otherwise.
    """
    if "all" not in targets:
        return False
    if len(targets) != 1:
        listed = ", ".join(targets)
        raise CommandError(f"`rustup target add {listed}` includes 'all'")
    return True


def _component_matches(given: str | None, found: str | None) -> bool:
    return given is None or (found is not None and found == given)


def bare_triple_candidates(
    triple: Triple,
    installed: Mapping[str, Triple | None] | Iterable[tuple[str, Triple | None]],
    default_name: str | None,
) -> list[str]:
    """List installed toolchains whose target matches a partial (arch, os, env) triple.

    `installed` maps each toolchain name to its parsed target, or None when the
    name does not parse. The default toolchain is never offered.
    """
    pairs = installed.items() if isinstance(installed, Mapping) else installed
    default_name = default_name or ""
    candidates = []
    for name, target in pairs:
        if name == default_name or target is None:
            continue
        if all(_component_matches(g, f) for g, f in zip(triple, target)):
            candidates.append(name)
    return candidates