"""
importer.py

Responsibility: Run one import of a bootstrap-sass release into the working tree.

Flow:
1) Check the archive reference
2) Acquire a temporary workspace (always released)
3) Extract the archive into it
4) Copy each mapping-table entry, in order, stopping at the first failure

This module does not parse arguments or print anything itself; progress is
reported through the optional `progress` callback.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from asset_importer.archive import extract_archive, require_archive
from asset_importer.mapping import ImportEntry, default_mapping
from asset_importer.workspace import temporary_workspace

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ImportEntry], None]


class ImportEntryFailed(RuntimeError):
    def __init__(self, entry: ImportEntry, reason: str) -> None:
        super().__init__(f"Failed to import {entry.source} => {entry.destination}: {reason}")
        self.entry = entry
        self.reason = reason


@dataclass(frozen=True)
class ImportResult:
    archive: Path
    working_tree: Path
    imported: tuple[ImportEntry, ...]


def format_progress(entry: ImportEntry) -> str:
    return f"[IMPORT] {entry.source:<60} => {entry.destination}"


def _inside(path: Path, root: Path) -> bool:
    return path.resolve().is_relative_to(root.resolve())


def _check_tree_targets(entry: ImportEntry, src_dir: Path, dst_dir: Path, working_tree: Path) -> None:
    """
    Refuse a directory copy if any file or directory it would write resolves outside
    the working tree (e.g. through a symlink already present under `dst_dir`).
    """
    for root, dirnames, filenames in os.walk(src_dir):
        rel = Path(root).relative_to(src_dir)
        for name in (*dirnames, *filenames):
            target = dst_dir / rel / name
            if not _inside(target, working_tree):
                raise ImportEntryFailed(entry, f"destination resolves outside the working tree: {target}")


def import_entry(entry: ImportEntry, *, extraction_root: Path, working_tree: Path) -> Path:
    """
    Copy a single entry and return the destination path.

    - Files are copied with `shutil.copy2` (content, permissions and timestamps).
    - Directories are copied recursively and merged into an existing destination,
      so a second run overwrites the first one's files in place.
    """
    src_path = extraction_root / entry.source
    dst_path = working_tree / entry.destination

    if not _inside(src_path, extraction_root):
        raise ImportEntryFailed(entry, "source resolves outside the extracted archive")
    if not _inside(dst_path, working_tree):
        raise ImportEntryFailed(entry, "destination resolves outside the working tree")
    if not src_path.exists():
        raise ImportEntryFailed(entry, f"source not found in archive: {src_path}")
    if dst_path.exists() and dst_path.is_dir() != src_path.is_dir():
        raise ImportEntryFailed(entry, f"destination type does not match source: {dst_path}")
    if src_path.is_dir():
        _check_tree_targets(entry, src_path, dst_path, working_tree)

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        if src_path.is_dir():
            shutil.copytree(src_path, dst_path, dirs_exist_ok=True)
        else:
            shutil.copy2(src_path, dst_path)
    except OSError as e:
        raise ImportEntryFailed(entry, str(e)) from e

    logger.debug("Copied %s to %s", src_path, dst_path)
    return dst_path


def import_archive(
    archive: str | Path,
    working_tree: str | Path,
    *,
    table: Sequence[ImportEntry] | None = None,
    progress: ProgressCallback | None = None,
    temp_root: str | Path | None = None,
) -> ImportResult:
    """
    Import the mapping table's entries from `archive` into `working_tree`.

    Raises MissingArchive, ExtractionFailed or ImportEntryFailed. The temporary
    workspace is removed before this function returns or raises.
    """
    archive_path = require_archive(archive)
    tree = Path(working_tree).resolve()
    entries = tuple(default_mapping() if table is None else table)

    imported: list[ImportEntry] = []
    with temporary_workspace(temp_root=temp_root) as workspace:
        extraction_root = extract_archive(archive_path, workspace)
        for entry in entries:
            if progress is not None:
                progress(entry)
            import_entry(entry, extraction_root=extraction_root, working_tree=tree)
            imported.append(entry)

    logger.debug("Imported %d entries from %s", len(imported), archive_path)
    return ImportResult(archive=archive_path, working_tree=tree, imported=tuple(imported))
