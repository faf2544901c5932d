"""Command-line interface for sketchshape.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single-image classification with a metrics summary
- Parallel batch classification with a progress bar
- JSON output for scripting
- Debug overlays of the pipeline artifacts
"""

from sketchshape.cli.app import cli, main

__all__ = ["cli", "main"]
