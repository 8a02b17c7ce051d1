"""Typed configuration values consumed by the resolver and launcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class BrowserTarget:
    """A browser and the profile it should open with."""

    browser: str
    profile: str

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "BrowserTarget":
        return cls(browser=str(raw["browser"]), profile=str(raw["profile"]))

    def label(self) -> str:
        return f"{self.browser}:{self.profile}"


@dataclass(frozen=True)
class Rule:
    open_in: BrowserTarget
    url_patterns: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "Rule":
        return cls(
            open_in=BrowserTarget.from_payload(raw["open_in"]),
            url_patterns=tuple(str(item) for item in raw.get("url_patterns", [])),
        )


@dataclass(frozen=True)
class RuleSet:
    """Ordered rules plus the target used when none of them match."""

    default: BrowserTarget
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class Config:
    browsers: dict[str, tuple[str, ...]]
    default: BrowserTarget
    rules: tuple[Rule, ...] = ()
    source_path: Path | None = field(default=None, compare=False)

    @classmethod
    def from_payload(
        cls, payload: dict[str, Any], source_path: Path | None = None
    ) -> "Config":
        browsers = {
            str(name): tuple(str(part) for part in template)
            for name, template in payload["browsers"].items()
        }
        return cls(
            browsers=browsers,
            default=BrowserTarget.from_payload(payload["default"]),
            rules=tuple(Rule.from_payload(item) for item in payload.get("rules", [])),
            source_path=source_path,
        )

    @property
    def rule_set(self) -> RuleSet:
        return RuleSet(default=self.default, rules=self.rules)

    def command_template(self, target: BrowserTarget) -> tuple[str, ...]:
        return self.browsers[target.browser]
