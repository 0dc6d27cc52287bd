"""Hostname canonicalization ahead of rule matching."""

from __future__ import annotations

from .constants import LABEL_SEPARATOR
from .models import Labels


def canonicalize(domain: str) -> Labels:
    """
    Turn a raw domain string into labels ready for matching.

    Lower-cases the string, strips leading and trailing dots and splits on
    the remaining ones. No validation is done: an empty domain becomes a
    single empty label, which matches no rule.

    Args:
        domain: Domain to canonicalize (e.g., ".WWW.Example.COM.")

    Returns:
        Tuple of labels (e.g., ("www", "example", "com"))
    """
    return tuple(domain.lower().strip(LABEL_SEPARATOR).split(LABEL_SEPARATOR))


def join_labels(labels: Labels) -> str:
    """Join labels back into a dotted domain."""
    return LABEL_SEPARATOR.join(labels)
