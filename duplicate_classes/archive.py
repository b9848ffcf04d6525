"""Archives and the class names inside them."""

from __future__ import annotations

import logging
import os
import re
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Tuple

from .errors import ConfigurationError, ExtractionFailure

logger = logging.getLogger(__name__)

CLASS_ENTRY = re.compile(r'^(META-INF/versions/[0-9]+/)?(?P<path>.*)[.]class$', re.IGNORECASE)
MODULE_INFO = 'module-info'


@dataclass(frozen=True)
class Archive:
    identifier: str
    path: str
    scope: str
    trail: Tuple[str, ...] = ()

    def __str__(self):
        return self.identifier


def archive_locator(path) -> str:
    """Return the jar: URI for an archive, e.g. ``jar:file:///x/y.jar!/``.

    Raises ConfigurationError if the path cannot be expressed as a file URI.
    """
    try:
        fspath = os.fspath(path)
        if isinstance(fspath, bytes):
            fspath = os.fsdecode(fspath)
        if '\x00' in fspath:
            raise ValueError('embedded null byte')
        uri = Path(fspath).absolute().as_uri()
    except (TypeError, ValueError) as exception:
        raise ConfigurationError(f'{path!r}: cannot build archive locator: {exception}') from exception
    return 'jar:' + uri + '!/'


def class_name(entry_name, skip_module_info=False):
    """Map an archive entry name to a dotted class name, or None if it is not a class."""
    match = CLASS_ENTRY.match(entry_name)
    if match is None:
        return None
    name = match.group('path').replace('/', '.')
    if not name or (skip_module_info and name == MODULE_INFO):
        return None
    return name


def _list_classes(identifier, path, skip_module_info):
    try:
        with zipfile.ZipFile(path) as jar:
            classes = set()
            for info in jar.infolist():
                if info.is_dir():
                    continue
                name = class_name(info.filename, skip_module_info)
                if name is not None:
                    classes.add(name)
            return frozenset(classes)
    except (zipfile.BadZipFile, OSError, EOFError, ValueError) as exception:
        raise ExtractionFailure(identifier, exception) from exception


def class_names_in(identifier, path, *, skip_module_info=False) -> FrozenSet[str]:
    """Return the set of fully-qualified class names in the archive at ``path``.

    Multi-release entries (META-INF/versions/N/...) count under their base name.
    An archive that cannot be read yields an empty set; only a path with no valid
    locator is an error.
    """
    locator = archive_locator(path)
    try:
        return _list_classes(identifier, path, skip_module_info)
    except ExtractionFailure as failure:
        if isinstance(failure.cause, zipfile.BadZipFile):
            # Zero-byte placeholders and other non-zip files are common.
            logger.debug('%s: not a zip archive (%s)', identifier, locator)
        else:
            logger.debug('%s: %s', identifier, failure.cause, exc_info=failure.cause)
        return frozenset()
