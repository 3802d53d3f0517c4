import pytest

from rustupcli.cli import (
    CommandError,
    bare_triple_candidates,
    check_target_all,
    parse_args,
)
from rustupcli.completions import CompletionCommand


def test_subcommand_required():
    with pytest.raises(SystemExit):
        parse_args([])


def test_update_without_toolchains():
    args = parse_args(["update", "--force"])
    assert args.action == ("update",)
    assert args.toolchain == []
    assert args.force is True
    assert args.no_self_update is False


def test_install_requires_toolchain():
    with pytest.raises(SystemExit):
        parse_args(["install"])


@pytest.mark.parametrize("alias", ["install", "update", "add"])
def test_toolchain_install_aliases(alias):
    args = parse_args(["toolchain", alias, "stable", "nightly"])
    assert args.action == ("toolchain", "install")
    assert args.toolchain == ["stable", "nightly"]


@pytest.mark.parametrize("alias", ["set", "add"])
def test_override_set_alias(alias):
    args = parse_args(["override", alias, "beta", "--path", "/tmp/x"])
    assert args.action == ("override", "set")
    assert args.toolchain == "beta"
    assert args.path == "/tmp/x"


def test_override_unset_nonexistent():
    args = parse_args(["override", "remove", "--nonexistent"])
    assert args.action == ("override", "unset")
    assert args.nonexistent is True
    assert args.path is None


def test_target_add_with_toolchain():
    args = parse_args(["target", "install", "a", "b", "--toolchain", "nightly"])
    assert args.action == ("target", "add")
    assert args.target == ["a", "b"]
    assert args.toolchain == "nightly"


def test_component_add_target():
    args = parse_args(["component", "add", "rust-src", "--target", "i686-apple-darwin"])
    assert args.component == ["rust-src"]
    assert args.target == "i686-apple-darwin"


def test_run_keeps_trailing_arguments():
    args = parse_args(["run", "--install", "nightly", "cargo", "--version", "-q"])
    assert args.install is True
    assert args.toolchain == "nightly"
    assert args.run_command == ["cargo", "--version", "-q"]


def test_run_requires_command():
    with pytest.raises(SystemExit):
        parse_args(["run", "nightly"])


def test_doc_page_flag():
    args = parse_args(["docs", "--nomicon", "--path"])
    assert args.action == ("doc",)
    assert args.page == "nomicon"
    assert args.path is True


def test_doc_pages_are_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["doc", "--book", "--std"])


def test_self_uninstall_no_prompt():
    args = parse_args(["self", "uninstall", "-y"])
    assert args.action == ("self", "uninstall")
    assert args.no_prompt is True


def test_show_without_subcommand():
    args = parse_args(["show"])
    assert args.action == ("show",)
    assert parse_args(["show", "home"]).action == ("show", "home")


def test_completions_default_command():
    args = parse_args(["completions", "bash"])
    assert args.shell == "bash"
    assert args.completion_command is CompletionCommand.RUSTUP
    assert parse_args(["completions", "zsh", "cargo"]).completion_command is CompletionCommand.CARGO


def test_completions_rejects_unknown_shell():
    with pytest.raises(SystemExit):
        parse_args(["completions", "tcsh"])


def test_check_target_all():
    assert check_target_all(["all"]) is True
    assert check_target_all(["i686-apple-darwin"]) is False
    with pytest.raises(CommandError):
        check_target_all(["all", "i686-apple-darwin"])


def test_bare_triple_candidates_matches_and_skips_default():
    installed = {
        "nightly-x86_64-apple-darwin": ("x86_64", "apple-darwin", None),
        "stable-x86_64-apple-darwin": ("x86_64", "apple-darwin", None),
        "stable-i686-apple-darwin": ("i686", "apple-darwin", None),
        "custom": None,
    }
    result = bare_triple_candidates(
        ("x86_64", None, None), installed, "stable-x86_64-apple-darwin"
    )
    assert result == ["nightly-x86_64-apple-darwin"]


def test_bare_triple_candidates_requires_present_component():
    installed = [("stable-x86_64-apple-darwin", ("x86_64", "apple-darwin", None))]
    assert bare_triple_candidates((None, None, "gnu"), installed, None) == []
    assert bare_triple_candidates((None, "apple-darwin", None), installed, None) == [
        "stable-x86_64-apple-darwin"
    ]