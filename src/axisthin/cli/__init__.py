"""Command-line interface for axisthin.

This module provides the CLI using Typer with rich output.

Key features:
- Thinning of transform forests stored as JSON
- Demo shapes: regular polygons, path strings and font glyphs
- Erosion radius matching the thinning scale
- Raw output mode for piping path strings
"""

from axisthin.cli.app import cli, main

__all__ = ["cli", "main"]
