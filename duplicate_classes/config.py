"""Per-run settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

COMPILE = 'compile'
PROVIDED = 'provided'
RUNTIME = 'runtime'
SYSTEM = 'system'

DEFAULT_INCLUDE_SCOPE = ','.join((COMPILE, RUNTIME, SYSTEM, PROVIDED))
DEFAULT_EXCLUDE_SCOPE = ''
DEFAULT_CLASS_LIST_LIMIT = 10
DEFAULT_DISCOVERED_SCOPE = COMPILE

ENV_INCLUDE_SCOPE = 'DUPLICATE_CLASSES_INCLUDE_SCOPE'
ENV_EXCLUDE_SCOPE = 'DUPLICATE_CLASSES_EXCLUDE_SCOPE'


@dataclass(frozen=True)
class AnalysisConfig:
    include_scope: str = DEFAULT_INCLUDE_SCOPE
    exclude_scope: str = DEFAULT_EXCLUDE_SCOPE
    class_list_limit: int = DEFAULT_CLASS_LIST_LIMIT
    skip_module_info: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AnalysisConfig':
        """Build a config from DUPLICATE_CLASSES_* variables, falling back to the defaults."""
        if environ is None:
            environ = os.environ
        return cls(
            include_scope=environ.get(ENV_INCLUDE_SCOPE, DEFAULT_INCLUDE_SCOPE),
            exclude_scope=environ.get(ENV_EXCLUDE_SCOPE, DEFAULT_EXCLUDE_SCOPE),
        )

    def with_overrides(self, **overrides) -> 'AnalysisConfig':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
