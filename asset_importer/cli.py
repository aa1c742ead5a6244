"""
cli.py

Responsibility: CLI entrypoint for the bootstrap-sass importer.

Usage: `import-bootstrap-sass path/to/bootstrap-sass-X.Y.Z.tar.gz`

The current directory is the working tree that receives the assets. Progress
lines go to stdout; a failure is reported as one line on stderr and a non-zero
exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from asset_importer.archive import ExtractionFailed, MissingArchive
from asset_importer.importer import ImportEntryFailed, format_progress, import_archive
from asset_importer.mapping import ImportEntry, MappingError

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def _print_progress(entry: ImportEntry) -> None:
    print(format_progress(entry), flush=True)


def import_cmd(args: argparse.Namespace) -> int:
    working_tree = Path.cwd()
    logger.debug("Importing %s into %s", args.archive, working_tree)
    import_archive(args.archive, working_tree, progress=_print_progress)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="import-bootstrap-sass",
        description="Import Bootstrap Sass assets from a release archive into the current working tree",
    )
    p.add_argument("archive", help="Path to the bootstrap-sass release archive (.tar.gz)")
    p.set_defaults(func=import_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (MissingArchive, ExtractionFailed, ImportEntryFailed, MappingError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
