"""Compile, verify and track progress through small Rust exercises."""

__version__ = "0.1.0"