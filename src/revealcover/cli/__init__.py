"""Command-line interface for revealcover.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Rectangle and triangle coverings of any canvas size
- Seeded, reproducible output
- JSON export for rendering layers
"""

from revealcover.cli.app import cli, main

__all__ = ["cli", "main"]
