"""Console entrypoint for the litegui asset generator.

This module delegates to :mod:`litegui_assets.cli` so that running
``python -m litegui_assets`` or the installed ``litegui-assets`` console
script executes the same code.
"""

from __future__ import annotations

import sys

from litegui_assets.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`litegui_assets.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
