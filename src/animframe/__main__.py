"""Console entrypoint for the animframe demos.

This module delegates to :mod:`animframe.cli` so that running
``python -m animframe`` or the installed ``animframe`` console script
executes the same code.
"""

from __future__ import annotations

from animframe.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`animframe.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
