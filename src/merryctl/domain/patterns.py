"""Wildcard pattern matching for service names.

Only leading and trailing ``*`` are recognised:

    ``*``        any name
    ``*text*``   name contains ``text``
    ``*text``    name ends with ``text``
    ``text*``    name starts with ``text``
    ``text``     exact match

A ``*`` in the interior of a pattern (``ap*i``) has no special meaning and
is compared literally, so such a pattern only matches a name that contains
the ``*`` character itself.

Case folding is the caller's job; :func:`matches` compares as given.
"""

from __future__ import annotations

WILDCARD = "*"


def matches(candidate: str, pattern: str) -> bool:
    """Return True if *candidate* matches *pattern*.

    Examples:
        >>> matches("api-worker", "api*")
        True
        >>> matches("api-worker", "*worker")
        True
        >>> matches("api-worker", "*-wor*")
        True
        >>> matches("api-worker", "ap*er")
        False
    """
    if pattern == WILDCARD:
        return True

    if len(pattern) >= 2 and pattern.startswith(WILDCARD) and pattern.endswith(WILDCARD):
        return pattern[1:-1] in candidate

    if pattern.startswith(WILDCARD):
        return candidate.endswith(pattern[1:])

    if pattern.endswith(WILDCARD):
        return candidate.startswith(pattern[:-1])

    return candidate == pattern
