"""Public API for publicsuffix.

Example:
    >>> public_suffix("foo.bar.com")
    'com'
    >>> registrable_domain("foo.bar.com")
    'bar.com'
    >>> public_suffix("foo.github.io", ignore_private=True)
    'io'
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .core.canonicalize import canonicalize, join_labels
from .core.config import resolve_options
from .core.matcher import find_prevailing_rule, select_suffix
from .core.models import MatchOptions, PrevailingRule
from .core.rule_store import RuleStore, get_default_rule_store

Options = Union[MatchOptions, dict[str, Any], None]

# Labels kept beyond the public suffix
_PUBLIC_SUFFIX_EXTRA_LABELS = 0
_REGISTRABLE_DOMAIN_EXTRA_LABELS = 1


def _effective_options(options: Options, ignore_private: Optional[bool]) -> MatchOptions:
    resolved = resolve_options(options)
    if ignore_private is not None:
        resolved = MatchOptions(ignore_private=ignore_private)
    return resolved


def _parse_domain(
    domain: str,
    extra_label_count: int,
    options: Options,
    ignore_private: Optional[bool],
    store: Optional[RuleStore],
) -> Optional[str]:
    match_options = _effective_options(options, ignore_private)
    labels = select_suffix(
        canonicalize(domain),
        extra_label_count,
        match_options.allowed_kinds,
        store if store is not None else get_default_rule_store(),
    )
    if labels is None:
        return None
    return join_labels(labels)


def public_suffix(
    domain: str,
    options: Options = None,
    *,
    ignore_private: Optional[bool] = None,
    store: Optional[RuleStore] = None,
) -> Optional[str]:
    """
    Extract the public suffix of a domain.

    Args:
        domain: Domain to inspect (e.g., "www.example.co.uk")
        options: MatchOptions or a mapping like {"ignore_private": True}
        ignore_private: Overrides options; True restricts matching to ICANN rules
        store: Rules to match against; defaults to the bundled list

    Returns:
        The public suffix (e.g., "co.uk"), or None when the domain has
        fewer labels than the prevailing rule requires
    """
    return _parse_domain(domain, _PUBLIC_SUFFIX_EXTRA_LABELS, options, ignore_private, store)


def registrable_domain(
    domain: str,
    options: Options = None,
    *,
    ignore_private: Optional[bool] = None,
    store: Optional[RuleStore] = None,
) -> Optional[str]:
    """
    Extract the registrable domain: the public suffix plus one more label.

    Takes the same arguments as public_suffix().

    Returns:
        The registrable domain (e.g., "example.co.uk"), or None when the
        domain is itself a public suffix or too short
    """
    return _parse_domain(domain, _REGISTRABLE_DOMAIN_EXTRA_LABELS, options, ignore_private, store)


def is_public_suffix(
    domain: str,
    options: Options = None,
    *,
    ignore_private: Optional[bool] = None,
    store: Optional[RuleStore] = None,
) -> bool:
    """Return True if the domain is exactly its own public suffix."""
    canonical = join_labels(canonicalize(domain))
    if not canonical:
        return False
    suffix = public_suffix(domain, options, ignore_private=ignore_private, store=store)
    return suffix == canonical


def prevailing_rule(
    domain: str,
    options: Options = None,
    *,
    ignore_private: Optional[bool] = None,
    store: Optional[RuleStore] = None,
) -> PrevailingRule:
    """Return the rule that decides the public suffix of a domain."""
    match_options = _effective_options(options, ignore_private)
    return find_prevailing_rule(
        canonicalize(domain),
        match_options.allowed_kinds,
        store if store is not None else get_default_rule_store(),
    )
