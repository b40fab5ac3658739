from __future__ import annotations

import os
import posixpath
from datetime import datetime
from pathlib import Path

import pytest

from filebrowser.services.filesystem import Entry


def make_entry(name: str, is_dir: bool = False, size: int = 0) -> Entry:
    mode = 0o40755 if is_dir else 0o100644
    return Entry(name=name, size=size, mtime=datetime(2024, 1, 2, 3, 4, 5), mode=mode, is_dir=is_dir)


class RecordingFileSystem:
    """In-memory FileSystem keyed by normalized relative directory."""

    def __init__(self, base: str, listing: dict[str, list[Entry]]):
        self.base = base
        self.listing = listing
        self.calls: list[tuple[str, str]] = []

    def _key(self, name: str) -> str:
        return posixpath.normpath(name.lstrip('/') or '.')

    def open(self, name: str):
        raise FileNotFoundError(name)

    def stat(self, name: str) -> Entry:
        self.calls.append(('stat', name))
        return make_entry(posixpath.basename(self._key(name)), is_dir=True)

    def read_dir(self, root: str) -> list[Entry]:
        self.calls.append(('read_dir', root))
        try:
            return self.listing[self._key(root)]
        except KeyError:
            raise FileNotFoundError(root) from None

    def walk(self, root: str = ''):
        yield root, self.read_dir(root)

    def abs(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self.base, path.lstrip('/')))


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """/<tmp>/srv/files with docs/ and readme.md, plus a sibling files-other/."""
    root = tmp_path / 'srv' / 'files'
    (root / 'docs' / 'guides').mkdir(parents=True)
    (root / 'docs' / 'index.txt').write_text('index')
    (root / 'readme.md').write_text('hello')
    (tmp_path / 'srv' / 'files-other').mkdir()
    (tmp_path / 'etc').mkdir()
    return root


NAMES_TEMPLATE = '{% for file in files %}{{ file.name }}|{% endfor %}'
CONTEXT_TEMPLATE = '{{ path }}\n{{ unescaped_path }}'


def norm(path: Path) -> str:
    return os.path.normpath(str(path))
