# js_sifter/__init__.py
"""
JsSifter package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point
from js_sifter.cli import cli as main_cli  # noqa: E402
