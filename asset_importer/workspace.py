"""
workspace.py

Responsibility: Scoped temporary storage for a single import run.

The directory is created with `tempfile.mkdtemp` (unique name, owner-only
permissions) and removed when the `with` block exits, whether it exits
normally or by exception.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "bootstrap-sass-"


@contextmanager
def temporary_workspace(
    *,
    prefix: str = WORKSPACE_PREFIX,
    temp_root: str | Path | None = None,
) -> Iterator[Path]:
    """
    Yield a freshly created, empty directory and delete it on exit.

    `temp_root` overrides the system temp directory (mainly for tests).
    """
    path = Path(tempfile.mkdtemp(prefix=prefix, dir=temp_root))
    logger.debug("Created workspace %s", path)
    try:
        yield path
    finally:
        shutil.rmtree(path)
        logger.debug("Removed workspace %s", path)
