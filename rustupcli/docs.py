"""The documentation pages that `rustup doc` can open."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "DEFAULT_DOC_URL",
    "DocPage",
    "DOC_PAGES",
    "doc_page_names",
    "doc_url_for",
]

DEFAULT_DOC_URL = "index.html"


@dataclass(frozen=True)
class DocPage:
    """A document selectable by a flag of the same name."""

    name: str
    help: str
    path: str


DOC_PAGES: tuple[DocPage, ...] = (
    DocPage("alloc", "The Rust core allocation and collections library", "alloc/index.html"),
    DocPage("book", "The Rust Programming Language book", "book/index.html"),
    DocPage("cargo", "The Cargo Book", "cargo/index.html"),
    DocPage("core", "The Rust Core Library", "core/index.html"),
    DocPage("edition-guide", "The Rust Edition Guide", "edition-guide/index.html"),
    DocPage(
        "nomicon",
        "The Dark Arts of Advanced and Unsafe Rust Programming",
        "nomicon/index.html",
    ),
    DocPage(
        "proc_macro",
        "A support library for macro authors when defining new macros",
        "proc_macro/index.html",
    ),
    DocPage("reference", "The Rust Reference", "reference/index.html"),
    DocPage(
        "rust-by-example",
        "A collection of runnable examples that illustrate various Rust concepts "
        "and standard libraries",
        "rust-by-example/index.html",
    ),
    DocPage("rustc", "The compiler for the Rust programming language", "rustc/index.html"),
    DocPage("rustdoc", "Generate documentation for Rust projects", "rustdoc/index.html"),
    DocPage("std", "Standard library API documentation", "std/index.html"),
    DocPage(
        "test",
        "Support code for rustc's built in unit-test and micro-benchmarking framework",
        "test/index.html",
    ),
    DocPage("unstable-book", "The Unstable Book", "unstable-book/index.html"),
    DocPage("embedded-book", "The Embedded Rust Book", "embedded-book/index.html"),
)

_BY_NAME = {page.name: page for page in DOC_PAGES}


def doc_page_names() -> list[str]:
    """Names of the selectable documents, in the order they are offered."""
    return [page.name for page in DOC_PAGES]


def doc_url_for(selected: Iterable[str]) -> str:
    """Return the index path of the first selected document, or the main index.

    Raises ValueError when a name does not denote a known document.
    """
    chosen = set(selected)
    unknown = sorted(name for name in chosen if name not in _BY_NAME)
    if unknown:
        raise ValueError(f"unknown documentation page: {', '.join(unknown)}")
    for page in DOC_PAGES:
        if page.name in chosen:
            return page.path
    return DEFAULT_DOC_URL