"""Where archives come from: a directory walk or a manifest file."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List

from .archive import Archive
from .config import DEFAULT_DISCOVERED_SCOPE
from .errors import ConfigurationError, ManifestError

logger = logging.getLogger(__name__)


def _is_jar(name):
    return name.lower().endswith('.jar')


def discover(roots: Iterable, scope: str = DEFAULT_DISCOVERED_SCOPE) -> List[Archive]:
    """Find .jar files under each root; a root may also be a jar itself."""
    archives = {}
    for root in roots:
        root = os.fspath(root)
        if not os.path.exists(root):
            logger.warning('%s: no such file or directory', root)
            continue
        if os.path.isfile(root):
            archives[root] = Archive(root, root, scope)
            continue
        for dirpath, dirs, files in os.walk(root):
            dirs.sort()
            for name in files:
                if not _is_jar(name):
                    continue
                path = os.path.join(dirpath, name)
                identifier = Path(os.path.relpath(path, root)).as_posix()
                if identifier in archives:
                    # same relative path under two roots
                    identifier = Path(path).as_posix()
                archives[identifier] = Archive(identifier, path, scope)
    return sorted(archives.values(), key=lambda a: a.identifier)


def read_manifest(path) -> List[Archive]:
    """Read ``identifier path [scope [trail...]]`` lines.

    Relative archive paths are taken relative to the manifest.  Lines starting
    with '#' and blank lines are skipped.
    """
    path = Path(path)
    base = path.parent
    archives = []
    seen = set()
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as exception:
        raise ManifestError(path, 0, str(exception)) from exception

    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        fields = line.split()
        if len(fields) < 2:
            raise ManifestError(path, lineno, f'expected "identifier path [scope [trail...]]", got {line!r}')
        identifier, archive_path = fields[0], fields[1]
        if identifier in seen:
            raise ManifestError(path, lineno, f'duplicate identifier {identifier}')
        seen.add(identifier)
        scope = fields[2] if len(fields) > 2 else DEFAULT_DISCOVERED_SCOPE
        archive_path = Path(archive_path)
        if not archive_path.is_absolute():
            archive_path = base / archive_path
        archives.append(Archive(identifier, str(archive_path), scope, tuple(fields[3:])))
    return archives


def combine(archives: Iterable[Archive], more: Iterable[Archive]) -> List[Archive]:
    """Append ``more`` to ``archives``; a clashing identifier is replaced by the archive's full path."""
    combined = list(archives)
    seen = {a.identifier for a in combined}
    for archive in more:
        if archive.identifier in seen:
            archive = replace(archive, identifier=Path(archive.path).as_posix())
        if archive.identifier in seen:
            raise ConfigurationError(f'{archive.identifier}: archive listed twice')
        seen.add(archive.identifier)
        combined.append(archive)
    return combined
