"""Allow running the CLI with ``python -m sketchshape``."""

from sketchshape.cli import cli

if __name__ == "__main__":
    cli()
