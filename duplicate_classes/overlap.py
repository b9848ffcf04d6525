"""Find archives whose class-name sets intersect.

Every pair of archives is compared (O(n^2) over the number of archives).  Pairs
with a non-empty intersection are grouped by the exact intersection, so classes
repeated verbatim across many archives (shaded or vendored copies) end up in a
single group with every archive that carries them.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class OverlapKind(enum.Enum):
    IDENTICAL = 'identical'
    CONTAINS = 'contains'
    PARTIAL = 'partial'


@dataclass(frozen=True)
class OverlapPair:
    first: str
    second: str
    common: FrozenSet[str]
    kind: OverlapKind
    container: Optional[str] = None
    contained: Optional[str] = None

    def describe(self) -> str:
        if self.kind is OverlapKind.IDENTICAL:
            return f'{self.first} and {self.second} contain the same class entries'
        if self.kind is OverlapKind.CONTAINS:
            return f'{self.container} fully contains {self.contained} class entries'
        return f'{self.first} and {self.second} contain {len(self.common)} common class entries'


@dataclass(frozen=True)
class OverlapGroup:
    names: FrozenSet[str]
    archives: Tuple[str, ...]

    def sorted_names(self) -> List[str]:
        return sorted(self.names)


def classify(first, second, first_names, second_names) -> Optional[OverlapPair]:
    """Describe how two class-name sets overlap; None if they are disjoint."""
    first_names = frozenset(first_names)
    second_names = frozenset(second_names)
    common = first_names & second_names
    if not common:
        return None
    if first_names == second_names:
        return OverlapPair(first, second, common, OverlapKind.IDENTICAL)
    if second_names <= first_names:
        return OverlapPair(first, second, common, OverlapKind.CONTAINS, container=first, contained=second)
    if first_names <= second_names:
        return OverlapPair(first, second, common, OverlapKind.CONTAINS, container=second, contained=first)
    return OverlapPair(first, second, common, OverlapKind.PARTIAL)


class OverlapReport:
    """Overlap groups ordered by size of the shared set, then by its sorted names."""

    def __init__(self, groups: Iterable[OverlapGroup] = (), pairs: Iterable[OverlapPair] = ()):
        self.groups: Tuple[OverlapGroup, ...] = tuple(groups)
        self.pairs: Tuple[OverlapPair, ...] = tuple(pairs)

    def __iter__(self) -> Iterator[OverlapGroup]:
        return iter(self.groups)

    def __len__(self):
        return len(self.groups)

    def __bool__(self):
        return bool(self.groups)

    def __repr__(self):
        return f'OverlapReport(groups={len(self.groups)}, pairs={len(self.pairs)})'

    def as_mapping(self) -> Dict[FrozenSet[str], FrozenSet[str]]:
        return {group.names: frozenset(group.archives) for group in self.groups}

    def group_for(self, names) -> Optional[OverlapGroup]:
        key = frozenset(names)
        for group in self.groups:
            if group.names == key:
                return group
        return None

    def archives(self) -> List[str]:
        return sorted({a for group in self.groups for a in group.archives})


def _group_order(names):
    return (len(names), sorted(names))


def find_overlaps(class_sets: Mapping[str, Iterable[str]]) -> OverlapReport:
    """Group archives by the exact set of class names they share pairwise.

    ``class_sets`` maps archive identifier to that archive's class names and
    must be complete; it is not modified.
    """
    identifiers = sorted(class_sets)
    names = {i: frozenset(class_sets[i]) for i in identifiers}

    members: Dict[FrozenSet[str], set] = {}
    pairs = []
    for n, first in enumerate(identifiers):
        for second in identifiers[n + 1:]:
            pair = classify(first, second, names[first], names[second])
            if pair is None:
                logger.debug('%s and %s contain disjoint class entries', first, second)
                continue
            logger.debug('%s', pair.describe())
            members.setdefault(pair.common, set()).update((first, second))
            pairs.append(pair)

    groups = [OverlapGroup(key, tuple(sorted(members[key])))
              for key in sorted(members, key=_group_order)]
    return OverlapReport(groups, pairs)
