"""Rule matching engine for publicsuffix.

Selects the prevailing rule for a label sequence and slices the public
suffix (or registrable domain) off its end:

1. The longest matching exception rule wins outright.
2. Otherwise the longest matching exact or wildcard rule wins.
3. Otherwise the implicit "*" rule applies.

Only wildcards in the leftmost position of a rule are matched.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Optional

from .constants import WILDCARD_LABEL
from .models import DEFAULT_RULE, Labels, PrevailingRule, RuleKind, RuleType
from .rule_store import RuleStore

logger = logging.getLogger(__name__)


def _suffixes(labels: Labels):
    """Yield suffixes of labels from longest to shortest."""
    for start in range(len(labels)):
        yield labels[start:]


def _find_exception_rule(
    labels: Labels,
    allowed_kinds: AbstractSet[RuleKind],
    store: RuleStore,
) -> Optional[PrevailingRule]:
    for suffix in _suffixes(labels):
        kind = store.lookup_exception(suffix)
        if kind in allowed_kinds:
            return PrevailingRule(labels=suffix, rule_type=RuleType.EXCEPTION, kind=kind)
    return None


def _find_normal_rule(
    labels: Labels,
    allowed_kinds: AbstractSet[RuleKind],
    store: RuleStore,
) -> Optional[PrevailingRule]:
    for suffix in _suffixes(labels):
        kind = store.lookup_exact(suffix)
        if kind in allowed_kinds:
            return PrevailingRule(labels=suffix, rule_type=RuleType.EXACT, kind=kind)

        wildcard = (WILDCARD_LABEL,) + suffix[1:]
        kind = store.lookup_wildcard(wildcard)
        if kind in allowed_kinds:
            return PrevailingRule(labels=wildcard, rule_type=RuleType.WILDCARD, kind=kind)
    return None


def find_prevailing_rule(
    labels: Labels,
    allowed_kinds: AbstractSet[RuleKind],
    store: RuleStore,
) -> PrevailingRule:
    """
    Select the rule that governs labels.

    Rules whose kind is not in allowed_kinds are treated as absent.

    Args:
        labels: Canonical labels of the domain
        allowed_kinds: Rule kinds that take part in matching
        store: Rules to match against

    Returns:
        The prevailing rule, or DEFAULT_RULE when nothing matches
    """
    rule = (
        _find_exception_rule(labels, allowed_kinds, store)
        or _find_normal_rule(labels, allowed_kinds, store)
        or DEFAULT_RULE
    )
    logger.debug("Prevailing rule for %s: %s (%s)", labels, rule.labels, rule.rule_type.value)
    return rule


def select_suffix(
    labels: Labels,
    extra_label_count: int,
    allowed_kinds: AbstractSet[RuleKind],
    store: RuleStore,
) -> Optional[Labels]:
    """
    Return the trailing labels covered by the prevailing rule.

    Args:
        labels: Canonical labels of the domain
        extra_label_count: 0 for the public suffix, 1 for the registrable domain
        allowed_kinds: Rule kinds that take part in matching
        store: Rules to match against

    Returns:
        Trailing labels in original order, or None when the domain has
        fewer labels than required
    """
    rule = find_prevailing_rule(labels, allowed_kinds, store)
    required = rule.effective_length + extra_label_count

    if len(labels) < required:
        return None
    return labels[len(labels) - required:]
