"""Turn include/exclude scope strings into the set of allowed scopes."""

from __future__ import annotations

import logging
import re
import string

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile('[' + re.escape(string.punctuation) + r'\s]+')


def tokenize(text):
    """Split on runs of punctuation or whitespace; tokens are lowercased, blanks dropped."""
    if not text:
        return []
    return [t.lower() for t in _SEPARATOR.split(text) if t.strip()]


def resolve_scope(include, exclude):
    scope = set(tokenize(include))
    scope.difference_update(tokenize(exclude))

    if not scope:
        logger.warning('Specified scope is empty')
        logger.debug('    include scope = %r', include)
        logger.debug('    exclude scope = %r', exclude)

    return frozenset(scope)


def in_scope(archive, scope):
    return (archive.scope or '').lower() in scope
