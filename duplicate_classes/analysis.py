"""Scope filter -> class-set extraction -> overlap detection, for one run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Mapping, Optional, Tuple

from .archive import Archive, class_names_in
from .config import AnalysisConfig
from .errors import ConfigurationError
from .overlap import OverlapReport, find_overlaps
from .scope import in_scope, resolve_scope

logger = logging.getLogger(__name__)

Progress = Callable[[int, int], None]


@dataclass(frozen=True)
class Analysis:
    scope: FrozenSet[str]
    archives: Tuple[Archive, ...]
    class_sets: Mapping[str, FrozenSet[str]]
    report: OverlapReport

    def trails(self):
        return {a.identifier: a.trail for a in self.archives if a.trail}


def analyze(archives: Iterable[Archive], config: Optional[AnalysisConfig] = None,
            progress: Optional[Progress] = None) -> Analysis:
    """Run the whole analysis.  ConfigurationError from extraction is not caught."""
    if config is None:
        config = AnalysisConfig()

    archives = sorted(archives, key=lambda a: a.identifier)
    for previous, archive in zip(archives, archives[1:]):
        if previous.identifier == archive.identifier:
            raise ConfigurationError(f'{archive.identifier}: archive listed twice')

    scope = resolve_scope(config.include_scope, config.exclude_scope)
    selected = []
    for archive in archives:
        if in_scope(archive, scope):
            selected.append(archive)
        else:
            logger.debug('%s: scope %r not selected', archive.identifier, archive.scope)

    class_sets = {}
    for count, archive in enumerate(selected, 1):
        class_sets[archive.identifier] = class_names_in(
            archive.identifier, archive.path, skip_module_info=config.skip_module_info)
        if progress is not None:
            progress(count, len(selected))

    return Analysis(scope, tuple(selected), class_sets, find_overlaps(class_sets))
