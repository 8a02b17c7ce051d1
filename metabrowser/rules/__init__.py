from metabrowser.rules.patterns import UrlMatcher, compile_url_patterns
from metabrowser.rules.resolver import Resolution, resolve, resolve_match

__all__ = [
    "Resolution",
    "UrlMatcher",
    "compile_url_patterns",
    "resolve",
    "resolve_match",
]
