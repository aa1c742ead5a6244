"""
asset_importer package

Vendors a fixed set of files from a bootstrap-sass release archive into the blog's
asset directories (`js/`, `fonts/`, `css/`).

Key responsibilities are split across modules:
- `mapping.py`: load and validate the (source, destination) mapping table
- `archive.py`: archive checks, extraction-root naming, tar extraction
- `workspace.py`: temporary directory scoped to a single run
- `importer.py`: one import run (extract -> copy each entry)
- `cli.py`: CLI entrypoint and exit codes
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
