"""
archive.py

Responsibility: Everything that touches the release archive itself.

- Validate that the archive reference points at a regular file.
- Derive the name of the top-level directory the archive is expected to unpack to.
- Unpack the archive into a directory the caller owns.

The extraction root name is a convention of upstream release tarballs
(`bootstrap-sass-3.3.7.tar.gz` unpacks to `bootstrap-sass-3.3.7/`). It is computed
from the file name only and is never checked against the archive contents here.
"""

from __future__ import annotations

import logging
import lzma
import tarfile
import zlib
from pathlib import Path

logger = logging.getLogger(__name__)

TAR_SUFFIXES: tuple[str, ...] = (
    ".tar.bz2",
    ".tar.gz",
    ".tar.xz",
    ".tbz2",
    ".tar",
    ".tgz",
    ".txz",
)


class MissingArchive(FileNotFoundError):
    pass


class ExtractionFailed(RuntimeError):
    pass


def require_archive(archive: str | Path) -> Path:
    """
    Return the archive path, raising MissingArchive unless it is an existing regular file.
    """
    path = Path(archive)
    if not path.is_file():
        raise MissingArchive(f'Bootstrap sass archive file not found : "{archive}"')
    return path


def archive_stem(archive: str | Path) -> str:
    """
    Strip the compressed-tar suffix from the archive's base name.

    >>> archive_stem("downloads/bootstrap-sass-3.3.7.tar.gz")
    'bootstrap-sass-3.3.7'
    """
    name = Path(archive).name
    lowered = name.lower()
    for suffix in TAR_SUFFIXES:
        if lowered.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def extract_archive(archive: Path, destination_dir: Path) -> Path:
    """
    Unpack the whole archive into destination_dir and return the expected extraction root.

    Members are filtered with tarfile's `data` filter, so absolute paths, `..` components
    and links pointing outside destination_dir abort the extraction.
    """
    logger.debug("Extracting %s into %s", archive, destination_dir)
    try:
        with tarfile.open(archive, "r:*") as tf:
            tf.extractall(destination_dir, filter="data")
    except (tarfile.TarError, EOFError, zlib.error, lzma.LZMAError, OSError) as e:
        raise ExtractionFailed(f"Failed to extract {archive}: {e}") from e
    return destination_dir / archive_stem(archive)
