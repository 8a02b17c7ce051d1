"""First-match-wins resolution of a URL to a browser target."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from metabrowser.config.models import BrowserTarget, Rule, RuleSet
from metabrowser.rules.patterns import compile_url_patterns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    target: BrowserTarget
    rule_index: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.rule_index is not None


def rule_matches(rule: Rule, url: str) -> bool:
    matcher = compile_url_patterns(rule.url_patterns)
    if matcher is None:
        return False
    return matcher.matches(url)


def resolve_match(rule_set: RuleSet, url: str) -> Resolution:
    for index, rule in enumerate(rule_set.rules):
        if rule_matches(rule, url):
            logger.debug("URL %s matched rule #%d -> %s", url, index, rule.open_in.label())
            return Resolution(target=rule.open_in, rule_index=index)
    logger.debug("URL %s matched no rule, using default %s", url, rule_set.default.label())
    return Resolution(target=rule_set.default)


def resolve(rule_set: RuleSet, url: str) -> BrowserTarget:
    return resolve_match(rule_set, url).target
