# rustupcli

Building blocks for the command line of a toolchain manager, as a plain
Python library with no third-party dependencies. It covers:

- **Argument parsing** (`rustupcli.cli`): the full `rustup` command grammar
  built on `argparse`, plus helpers for checking `target add all` and for
  suggesting installed toolchains that match a partial target triple.
- **PATH management** (`rustupcli.paths`): which shell profile files get the
  `export PATH=...` line, adding and removing that line, spotting an existing
  `rustc` or `cargo` on `PATH`, and clearing out the cargo home directory.
- **Self-update** (`rustupcli.selfupdate`): reading the release file, working
  out whether a newer version is available and where to download it,
  reading a program's `--version` output, and removing a leftover
  `rustup-init` binary.
- **Shell completions** (`rustupcli.completions`): choosing between the
  manager's own completions and the line that loads cargo's completion script.
- **Documentation pages** (`rustupcli.docs`): the pages `rustup doc` can open
  and the index file for each.

## Installation

Install the package with pip from a checkout of this repository. Python 3.11
or later is required.

## Examples

Parse a command line; each parsed namespace carries an `action` tuple naming
the subcommand:

```python
from rustupcli.cli import parse_args

args = parse_args(["toolchain", "install", "stable", "--no-self-update"])
args.action          # ('toolchain', 'install')
args.toolchain       # ['stable']
args.no_self_update  # True
```

Invalid command lines make `argparse` print a usage message and exit.

`"all"` may only be given on its own to `target add`:

```python
from rustupcli.cli import CommandError, check_target_all

check_target_all(["all"])                    # True
check_target_all(["x86_64-unknown-linux-gnu"])  # False
check_target_all(["all", "wasm32-unknown-unknown"])  # raises CommandError
```

Suggest installed toolchains for a partial `(arch, os, env)` triple; the
default toolchain is never offered:

```python
from rustupcli.cli import bare_triple_candidates

bare_triple_candidates(
    ("i686", None, None),
    {
        "stable-x86_64-unknown-linux-gnu": ("x86_64", "unknown-linux", "gnu"),
        "stable-i686-unknown-linux-gnu": ("i686", "unknown-linux", "gnu"),
    },
    "stable-x86_64-unknown-linux-gnu",
)
# ['stable-i686-unknown-linux-gnu']
```

Pull a version number out of the output of `--version`:

```python
from rustupcli.selfupdate import parse_new_rustup_version

parse_new_rustup_version("rustup 1.21.1 (7832b2ebe 2019-12-20)")
# '1.21.1'
```

Find out whether the release file offers a different version:

```python
from rustupcli.selfupdate import available_update, update_download_url, UPDATE_ROOT

release = 'schema-version = "1"\nversion = "1.22.0"\n'
available_update(release, "1.21.1")   # '1.22.0'
available_update(release, "1.22.0")   # None
update_download_url(UPDATE_ROOT, "1.22.0", "x86_64-unknown-linux-gnu", "")
```

A malformed release file, a missing or non-string key, or a schema version
other than `"1"` raises `ReleaseError`.

Work with shell profiles:

```python
from rustupcli.paths import canonical_cargo_home, shell_export_string

home = canonical_cargo_home("/home/user/.cargo", "/home/user", unix=True)
home                       # '$HOME/.cargo'
shell_export_string(home)  # 'export PATH="$HOME/.cargo/bin:$PATH"'
```

`get_add_path_methods` and `get_remove_path_methods` return
`PathUpdateMethod` values naming the profile files; `add_to_path` and
`remove_from_path` then append or remove the export line.

Completions and documentation pages:

```python
from rustupcli.completions import CompletionCommand, cargo_completion_script
from rustupcli.docs import doc_url_for

CompletionCommand.parse("Cargo")   # CompletionCommand.CARGO
CompletionCommand.variants()       # ['rustup', 'cargo']
cargo_completion_script("bash")
# 'source $(rustc --print sysroot)/etc/bash_completion.d/cargo'
doc_url_for(["book"])              # 'book/index.html'
doc_url_for([])                    # 'index.html'
```

Asking for cargo completions for a shell other than bash or zsh raises
`UnsupportedCompletionShell`.

## What this package does not do

It has no command to run: `parse_args` only parses, and nothing here carries
out the parsed commands, installs or removes toolchains, downloads files, or
runs the interactive install and uninstall flow. It also has no parser for
the installer's own options and no install, post-install or uninstall
message text. Those parts have to be supplied by the program that uses this
library.

## Running the tests

Install the `test` extra and run pytest from the repository root.