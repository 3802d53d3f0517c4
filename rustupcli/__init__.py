"""Argument parsing, PATH handling, self-update checks, completions and doc pages for a toolchain manager."""

__version__ = "0.1.0"