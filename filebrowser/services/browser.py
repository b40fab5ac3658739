from __future__ import annotations

import os
import posixpath
from typing import TextIO, Union
from urllib.parse import unquote

import structlog
from jinja2 import Template

from ..templates import compile_template
from .filesystem import FileSystem, ParentEntry
from .ordering import sort_entries

logger = structlog.get_logger(__name__)


class AccessDenied(PermissionError):
    pass


def is_within(path: str, root: str) -> bool:
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


class Browser:
    """Lists directories under a fixed root and renders them through a template.

    The root is whatever the filesystem resolves ``''`` to when the browser is
    built; a requested path that resolves anywhere else than the root or one
    of its descendants raises :class:`AccessDenied` before anything is read.
    """

    def __init__(self, fs: FileSystem, template: Union[str, Template]):
        self.fs = fs
        self.root_abs = os.path.normpath(fs.abs(''))
        self.template = compile_template(template) if isinstance(template, str) else template

    def resolve(self, path: str) -> tuple[str, str]:
        """Return the normalized request path and its absolute form."""
        if not path:
            path = '/'

        path = posixpath.normpath(path)
        if path.startswith('//'):
            path = '/' + path.lstrip('/')

        resolved = os.path.normpath(self.fs.abs(path))
        if not is_within(resolved, self.root_abs):
            logger.warning('access_denied', path=path, resolved=resolved, root=self.root_abs)
            raise AccessDenied(f'{path!r} resolves outside the browse root')
        return path, resolved

    def file_listing(self, path: str, out: TextIO) -> None:
        path, resolved = self.resolve(path)

        files = list(self.fs.read_dir(path))
        logger.debug('listing_resolved', path=path, resolved=resolved)

        if resolved not in ('/', '.') and resolved != self.root_abs:
            parent = self.fs.stat(posixpath.join(path, '..'))
            files.append(ParentEntry(parent))

        files = sort_entries(files)

        unescaped_path = os.path.normpath(os.path.join(self.root_abs, unquote(path).lstrip('/')))
        # A doubly encoded '..' decodes into a climb; show the root instead.
        if not is_within(unescaped_path, self.root_abs):
            unescaped_path = self.root_abs

        self.template.stream(files=files, path=path, unescaped_path=unescaped_path).dump(out)
