"""Text and JSON renderings of an overlap report."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from .archive import Archive, archive_locator
from .config import DEFAULT_CLASS_LIST_LIMIT
from .overlap import OverlapReport

NO_OVERLAPS = 'No archives with overlapping classes were detected.'


def render(report: OverlapReport, *, limit: int = DEFAULT_CLASS_LIST_LIMIT,
           trails: Optional[Mapping[str, Iterable[str]]] = None) -> List[str]:
    """Lines for the console.  Only the class list is truncated, never the archives."""
    if limit < 1:
        raise ValueError(f'limit must be positive, got {limit}')
    if not report:
        return [NO_OVERLAPS]

    trails = trails or {}
    lines = []
    for group in report:
        names = group.sorted_names()
        lines.extend(['', ''])
        lines.extend(names[:limit])
        if len(names) > limit:
            lines.append(f'... ({len(names) - limit} more classes)')
        lines.append('')
        for identifier in group.archives:
            trail = ', '.join(trails.get(identifier, ()))
            lines.append(f' {identifier} [{trail}]' if trail else f' {identifier}')
    return lines


def render_pairs(report: OverlapReport) -> List[str]:
    return [pair.describe() for pair in report.pairs]


def to_dict(report: OverlapReport, archives: Optional[Iterable[Archive]] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        'groups': [
            {'classes': group.sorted_names(), 'archives': list(group.archives)}
            for group in report
        ],
        'pairs': [
            {
                'first': pair.first,
                'second': pair.second,
                'kind': pair.kind.value,
                'container': pair.container,
                'contained': pair.contained,
                'common': len(pair.common),
            }
            for pair in report.pairs
        ],
    }
    if archives is not None:
        result['archives'] = {
            a.identifier: {
                'path': str(a.path),
                'locator': archive_locator(a.path),
                'scope': a.scope,
                'trail': list(a.trail),
            }
            for a in sorted(archives, key=lambda a: a.identifier)
        }
    return result
