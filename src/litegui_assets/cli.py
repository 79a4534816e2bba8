"""Command-line interface for the litegui asset generator.

Running with no arguments renders the whole fixed batch into the default
output tree. The optional flags only redirect the roots, narrow the batch
for quicker iteration, or change log verbosity.
"""

from __future__ import annotations

import argparse
import logging
import sys

from litegui_assets import __version__
from litegui_assets.catalog import all_families, select
from litegui_assets.errors import AssetError
from litegui_assets.frames import run_families
from litegui_assets.settings.schema import make_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(
        prog="litegui-assets",
        description="Render the litegui shell graphics into an output tree",
    )
    p.add_argument(
        "--src",
        dest="source_root",
        default=None,
        help="Directory holding the source icons (default: changes_edited)",
    )
    p.add_argument(
        "--dst",
        dest="output_root",
        default=None,
        help="Directory to write generated assets under "
        "(default: changes_generated)",
    )
    p.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="NAME",
        help="Render only this family or family group; may be repeated",
    )
    p.add_argument(
        "--list",
        action="store_true",
        help="Print the family names and exit",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> int:
    """Entrypoint; returns the process exit status.

    This is the only place generator errors are caught: they are logged
    and turned into exit status 1.
    """
    args = parse_args(argv)
    if args.version:
        print(f"litegui-assets {__version__}")
        return 0

    _configure_logging(args.verbose)
    try:
        settings = make_settings(
            source_root=args.source_root, output_root=args.output_root
        )
        families = all_families(settings)
        if args.list:
            for f in families:
                print(f.name)
            return 0
        if args.only:
            families = select(families, args.only)
        written = run_families(families)
    except AssetError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Wrote %d files under %s", len(written), settings.output_root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
