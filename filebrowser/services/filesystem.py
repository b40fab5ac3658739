from __future__ import annotations

import os
import posixpath
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, ClassVar, Iterator, Protocol


@dataclass(frozen=True)
class Entry:
    name: str
    size: int
    mtime: datetime
    mode: int
    is_dir: bool

    is_parent: ClassVar[bool] = False

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> Entry:
        return cls(
            name=name,
            size=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime),
            mode=st.st_mode,
            is_dir=stat.S_ISDIR(st.st_mode),
        )

    @property
    def mode_string(self) -> str:
        return stat.filemode(self.mode)


PARENT_NAME = '..'


@dataclass(frozen=True)
class ParentEntry:
    """The "go up" row: the parent directory's entry shown under a fixed name."""

    entry: Entry

    name: ClassVar[str] = PARENT_NAME
    is_parent: ClassVar[bool] = True

    @property
    def size(self) -> int:
        return self.entry.size

    @property
    def mtime(self) -> datetime:
        return self.entry.mtime

    @property
    def mode(self) -> int:
        return self.entry.mode

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def mode_string(self) -> str:
        return self.entry.mode_string


class FileSystem(Protocol):
    """A directory space rooted at a base fixed at construction.

    Names passed to every method are relative to that base. A leading
    separator does not make a name absolute; the backend joins and
    normalizes it itself.
    """

    def open(self, name: str) -> BinaryIO:
        ...

    def stat(self, name: str) -> Entry:
        ...

    def read_dir(self, root: str) -> list[Entry]:
        ...

    def walk(self, root: str = '') -> Iterator[tuple[str, list[Entry]]]:
        ...

    def abs(self, path: str) -> str:
        ...


class LocalFileSystem:
    def __init__(self, base: str):
        self.base = base

    def _join(self, name: str) -> str:
        return os.path.normpath(os.path.join(self.base, name.lstrip('/')))

    def open(self, name: str) -> BinaryIO:
        return open(self._join(name), 'rb')

    def stat(self, name: str) -> Entry:
        target = self._join(name)
        return Entry.from_stat(os.path.basename(target), os.stat(target))

    def read_dir(self, root: str) -> list[Entry]:
        target = Path(self._join(root))
        entries = [Entry.from_stat(child.name, child.lstat()) for child in target.iterdir()]
        entries.sort(key=lambda e: e.name)
        return entries

    def walk(self, root: str = '') -> Iterator[tuple[str, list[Entry]]]:
        # lstat-based entries never report a symlinked directory as a
        # directory, so the recursion cannot loop.
        entries = self.read_dir(root)
        yield root, entries
        for entry in entries:
            if entry.is_dir:
                yield from self.walk(posixpath.join(root, entry.name))

    def abs(self, path: str) -> str:
        return os.path.abspath(self._join(path))
