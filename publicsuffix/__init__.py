"""Public suffix and registrable domain lookup based on the Public Suffix List."""

from .api import is_public_suffix, prevailing_rule, public_suffix, registrable_domain
from .core.config import ConfigError
from .core.constants import APP_VERSION
from .core.models import MatchOptions, PrevailingRule, Rule, RuleKind, RuleType
from .core.rule_store import RuleStore, RuleStoreError, load_rule_store, parse_rules

__version__ = APP_VERSION

__all__ = [
    "public_suffix",
    "registrable_domain",
    "is_public_suffix",
    "prevailing_rule",
    "MatchOptions",
    "PrevailingRule",
    "Rule",
    "RuleKind",
    "RuleType",
    "RuleStore",
    "RuleStoreError",
    "ConfigError",
    "load_rule_store",
    "parse_rules",
]
