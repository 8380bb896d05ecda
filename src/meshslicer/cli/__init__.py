"""Command-line interface for meshslicer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Slice a JSON shape or the default quad along repeated --cut options
- Fragment summary table
- Verbose/quiet output modes
- JSON mesh output
"""

from meshslicer.cli.app import cli, main

__all__ = ["cli", "main"]
