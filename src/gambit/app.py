"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(prog="gambit", description="Two-player chess board.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every move decision"
    )
    # Anything unknown (e.g. -platform offscreen) is left for Qt.
    return parser.parse_known_args(argv)


def main() -> None:
    """Launch the Gambit application."""
    from gambit.ui.bootstrap import run_application

    args, qt_args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application([sys.argv[0], *qt_args]))


if __name__ == "__main__":
    main()
