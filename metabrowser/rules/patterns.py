"""Compile URL patterns into a single case-insensitive matcher.

Patterns have the form ``[*.]host[/path]``. A leading ``*.`` also accepts any
chain of subdomains in front of the rest of the pattern. Every pattern must be
followed by the end of the URL or a ``/``, so ``example.com`` never matches
``example.com.evil.net`` or ``badexample.com``. An optional ``http://`` or
``https://`` in front of the URL is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Iterable, Optional

RE_PREFIX: Final[str] = r"^(?:https?://)?(?:"
RE_SUFFIX: Final[str] = r")"

WILDCARD: Final[str] = "*."
WILDCARD_RE: Final[str] = r"(?:.+\.)?"
URL_PATTERN_SUFFIX: Final[str] = r"(?:/|\Z)"


@dataclass(frozen=True)
class UrlMatcher:
    regex: re.Pattern[str]

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def matches(self, url: str) -> bool:
        return self.regex.match(url) is not None


def escape_url_pattern(url_pattern: str) -> str:
    if url_pattern.startswith(WILDCARD):
        escaped = WILDCARD_RE + re.escape(url_pattern[len(WILDCARD) :])
    else:
        escaped = re.escape(url_pattern)
    return escaped + URL_PATTERN_SUFFIX


def url_patterns_to_regex(url_patterns: Iterable[str]) -> str:
    body = "|".join(escape_url_pattern(pattern) for pattern in url_patterns)
    return f"{RE_PREFIX}{body}{RE_SUFFIX}"


@lru_cache(maxsize=256)
def _compile(url_patterns: tuple[str, ...]) -> UrlMatcher:
    return UrlMatcher(re.compile(url_patterns_to_regex(url_patterns), re.IGNORECASE))


def compile_url_patterns(url_patterns: Iterable[str]) -> Optional[UrlMatcher]:
    """Return a matcher accepting any of ``url_patterns``, or None if there are none."""
    key = tuple(url_patterns)
    if not key:
        return None
    return _compile(key)
