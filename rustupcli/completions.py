"""Shell completion choices and the cargo completion loader line."""

from __future__ import annotations

import enum

__all__ = [
    "SHELLS",
    "CompletionCommand",
    "UnsupportedCompletionShell",
    "cargo_completion_script",
]

SHELLS = ("bash", "fish", "zsh", "powershell", "elvish")

_CARGO_SCRIPTS = {
    "bash": "/etc/bash_completion.d/cargo",
    "zsh": "/share/zsh/site-functions/_cargo",
}


class CompletionCommand(enum.Enum):
    """The program whose completions are generated."""

    RUSTUP = "rustup"
    CARGO = "cargo"

    @classmethod
    def parse(cls, text: str) -> CompletionCommand:
        """Match a command name, ignoring ASCII case."""
        wanted = text.lower() if text.isascii() else text
        for command in cls:
            if command.value == wanted:
                return command
        options = ", ".join(cls.variants())
        raise ValueError(f"[valid values: {options}]")

    @classmethod
    def variants(cls) -> list[str]:
        """Names accepted on the command line, in order."""
        return [command.value for command in cls]

    def __str__(self) -> str:
        return self.value


class UnsupportedCompletionShell(Exception):
    """Completions for the command cannot be produced for the shell."""

    def __init__(self, shell: str, command: CompletionCommand) -> None:
        super().__init__(f"{shell} does not currently support completions for {command}")
        self.shell = shell
        self.command = command


def cargo_completion_script(shell: str) -> str:
    """The line a shell sources to load cargo's own completion script."""
    if shell not in SHELLS:
        raise ValueError(f"unknown shell '{shell}' [valid values: {', '.join(SHELLS)}]")
    script = _CARGO_SCRIPTS.get(shell)
    if script is None:
        raise UnsupportedCompletionShell(shell, CompletionCommand.CARGO)
    return f"source $(rustc --print sysroot){script}"