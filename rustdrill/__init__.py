"""Compile, test and track progress through a directory of small Rust exercises."""

__version__ = "0.1.0"