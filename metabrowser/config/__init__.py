from metabrowser.config.models import BrowserTarget, Config, Rule, RuleSet
from metabrowser.config.repository import ConfigRepository

__all__ = [
    "BrowserTarget",
    "Config",
    "ConfigRepository",
    "Rule",
    "RuleSet",
]
