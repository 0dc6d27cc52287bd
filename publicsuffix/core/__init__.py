"""Core module for publicsuffix."""

from .canonicalize import canonicalize, join_labels
from .config import ConfigManager, ConfigError, resolve_options
from .logging_config import setup_logging
from .matcher import find_prevailing_rule, select_suffix
from .models import (
    DEFAULT_RULE,
    Labels,
    MatchOptions,
    PrevailingRule,
    Rule,
    RuleKind,
    RuleType,
)
from .rule_store import (
    RuleStore,
    RuleStoreError,
    clear_cache,
    get_default_rule_store,
    load_rule_store,
    parse_rule,
    parse_rules,
)

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    "resolve_options",
    # Logging
    "setup_logging",
    # Models
    "DEFAULT_RULE",
    "Labels",
    "MatchOptions",
    "PrevailingRule",
    "Rule",
    "RuleKind",
    "RuleType",
    # Rule store
    "RuleStore",
    "RuleStoreError",
    "clear_cache",
    "get_default_rule_store",
    "load_rule_store",
    "parse_rule",
    "parse_rules",
    # Matching
    "canonicalize",
    "join_labels",
    "find_prevailing_rule",
    "select_suffix",
]
