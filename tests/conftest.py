from __future__ import annotations

import os
import tarfile
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

RELEASE = "bootstrap-sass-3.3.7"


def release_files() -> dict[str, bytes]:
    """Files of a (tiny) bootstrap-sass release, keyed by path under the release root."""
    return {
        "assets/javascripts/bootstrap.min.js": b"/*! Bootstrap v3.3.7 */\n!function(a){}(jQuery);\n",
        "assets/javascripts/bootstrap.js": b"// not vendored\n",
        "assets/fonts/bootstrap/glyphicons-halflings-regular.eot": os.urandom(2048),
        "assets/fonts/bootstrap/glyphicons-halflings-regular.svg": b"<svg xmlns='http://www.w3.org/2000/svg'/>\n",
        "assets/fonts/bootstrap/glyphicons-halflings-regular.ttf": os.urandom(2048),
        "assets/fonts/bootstrap/glyphicons-halflings-regular.woff": os.urandom(2048),
        "assets/fonts/bootstrap/glyphicons-halflings-regular.woff2": os.urandom(2048),
        "assets/stylesheets/bootstrap/_variables.scss": b"$brand-primary: #337ab7 !default;\n",
        "assets/stylesheets/bootstrap/mixins/_buttons.scss": b"@mixin button-variant($color) {}\n",
        "assets/stylesheets/_bootstrap.scss": b'@import "bootstrap/variables";\n',
        "assets/stylesheets/_bootstrap-compass.scss": b"@function twbs-font-path($path) {}\n",
        "templates/project/_bootstrap-variables.sass": b"$brand-primary: darken(#428bca, 6.5%)\n",
    }


def write_tree(root: Path, files: dict[str, bytes]) -> None:
    for rel, data in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


def build_archive(directory: Path, files: dict[str, bytes], *, name: str = f"{RELEASE}.tar.gz") -> Path:
    """Pack `files` under a single top-level directory named after the archive."""
    stem = name[: -len(".tar.gz")]
    staging = directory / "staging"
    write_tree(staging / stem, files)
    archive = directory / name
    with tarfile.open(archive, "w:gz") as tf:
        tf.add(staging / stem, arcname=stem)
    return archive


@pytest.fixture
def files() -> dict[str, bytes]:
    return release_files()


@pytest.fixture
def archive(tmp_path: Path, files: dict[str, bytes]) -> Path:
    return build_archive(tmp_path / "downloads", files)


@pytest.fixture
def working_tree(tmp_path: Path) -> Path:
    tree = tmp_path / "blog"
    tree.mkdir()
    return tree


@pytest.fixture
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A private temp directory, also used by tempfile for code that does not take `temp_root`."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def make_archive() -> Callable[..., Path]:
    """`build_archive` as a fixture: `make_archive(directory, files, name=...)`."""
    return build_archive
