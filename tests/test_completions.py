import pytest

from rustupcli.completions import (
    SHELLS,
    CompletionCommand,
    UnsupportedCompletionShell,
    cargo_completion_script,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rustup", CompletionCommand.RUSTUP),
        ("cargo", CompletionCommand.CARGO),
        ("RUSTUP", CompletionCommand.RUSTUP),
        ("Cargo", CompletionCommand.CARGO),
    ],
)
def test_parse_ignores_case(text, expected):
    assert CompletionCommand.parse(text) is expected


def test_parse_unknown_lists_valid_values():
    with pytest.raises(ValueError) as info:
        CompletionCommand.parse("make")
    assert str(info.value) == "[valid values: rustup, cargo]"


def test_variants_in_order():
    assert CompletionCommand.variants() == ["rustup", "cargo"]


def test_display_round_trips_through_parse():
    for command in CompletionCommand:
        assert CompletionCommand.parse(str(command)) is command


def test_cargo_script_bash():
    assert (
        cargo_completion_script("bash")
        == "source $(rustc --print sysroot)/etc/bash_completion.d/cargo"
    )


def test_cargo_script_zsh():
    assert (
        cargo_completion_script("zsh")
        == "source $(rustc --print sysroot)/share/zsh/site-functions/_cargo"
    )


@pytest.mark.parametrize("shell", ["fish", "powershell", "elvish"])
def test_cargo_script_unsupported_shell(shell):
    with pytest.raises(UnsupportedCompletionShell) as info:
        cargo_completion_script(shell)
    assert info.value.shell == shell
    assert info.value.command is CompletionCommand.CARGO


def test_cargo_script_unknown_shell():
    with pytest.raises(ValueError):
        cargo_completion_script("tcsh")


def test_every_known_shell_gives_line_or_unsupported():
    supported = []
    for shell in SHELLS:
        try:
            line = cargo_completion_script(shell)
        except UnsupportedCompletionShell:
            continue
        assert line.startswith("source $(rustc --print sysroot)")
        supported.append(shell)
    assert supported == ["bash", "zsh"]