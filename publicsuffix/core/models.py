"""Core data models for publicsuffix."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import LABEL_SEPARATOR, WILDCARD_LABEL, EXCEPTION_PREFIX

# Ordered labels of a hostname or rule, TLD last: ("foo", "bar", "com")
Labels = tuple[str, ...]


class RuleKind(Enum):
    """Section of the suffix list a rule came from."""

    ICANN = "icann"
    PRIVATE = "private"


class RuleType(Enum):
    """How a rule is matched against a domain."""

    EXACT = "exact"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class Rule:
    """A single parsed suffix list rule."""

    labels: Labels  # Wildcard rules carry "*" as labels[0]; no "!" for exceptions
    kind: RuleKind
    rule_type: RuleType

    def __str__(self) -> str:
        text = LABEL_SEPARATOR.join(self.labels)
        if self.rule_type is RuleType.EXCEPTION:
            return EXCEPTION_PREFIX + text
        return text


@dataclass(frozen=True)
class PrevailingRule:
    """
    The rule selected for a given domain.

    kind is None only for the implicit "*" rule used when nothing matches.
    """

    labels: Labels
    rule_type: RuleType
    kind: Optional[RuleKind] = None

    @property
    def is_default(self) -> bool:
        """True for the implicit "*" rule."""
        return self.kind is None

    @property
    def effective_length(self) -> int:
        """Number of trailing labels that make up the public suffix."""
        # An exception rule is applied with its leftmost label removed
        if self.rule_type is RuleType.EXCEPTION:
            return len(self.labels) - 1
        return len(self.labels)


DEFAULT_RULE = PrevailingRule(labels=(WILDCARD_LABEL,), rule_type=RuleType.WILDCARD)


@dataclass(frozen=True)
class MatchOptions:
    """Options accepted by the public API."""

    ignore_private: bool = False

    @property
    def allowed_kinds(self) -> frozenset[RuleKind]:
        """Rule kinds that take part in matching."""
        if self.ignore_private:
            return frozenset({RuleKind.ICANN})
        return frozenset({RuleKind.ICANN, RuleKind.PRIVATE})

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"ignore_private": self.ignore_private}

    @classmethod
    def from_dict(cls, data: dict) -> MatchOptions:
        """Create instance from dictionary."""
        return cls(ignore_private=bool(data.get("ignore_private", False)))
