"""Public Suffix List loader for publicsuffix.

Parses the line-oriented suffix list into three frozen rule maps keyed
by label tuple:

- Exact rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck means any single label under ck is a public suffix)
- Exception rules (e.g., !www.ck means www.ck is NOT a public suffix)

Each rule is tagged with the section it was read from (ICANN or PRIVATE).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .constants import (
    BEGIN_ICANN_MARKER,
    BEGIN_PRIVATE_MARKER,
    COMMENT_PREFIX,
    DEFAULT_PSL_FILE,
    END_ICANN_MARKER,
    END_PRIVATE_MARKER,
    EXCEPTION_PREFIX,
    LABEL_SEPARATOR,
    WILDCARD_LABEL,
)
from .models import Labels, Rule, RuleKind, RuleType

logger = logging.getLogger(__name__)


class RuleStoreError(Exception):
    """Raised when the suffix list cannot be read or contains a malformed rule."""
    pass


class RuleStore:
    """
    Read-only collection of parsed suffix list rules.

    The three maps are frozen at construction, so one instance can be
    shared between any number of threads without locking.
    """

    def __init__(
        self,
        exact: Mapping[Labels, RuleKind] | None = None,
        wildcard: Mapping[Labels, RuleKind] | None = None,
        exception: Mapping[Labels, RuleKind] | None = None,
    ):
        self._exact = MappingProxyType(dict(exact or {}))
        self._wildcard = MappingProxyType(dict(wildcard or {}))
        self._exception = MappingProxyType(dict(exception or {}))

    @property
    def exact_rules(self) -> Mapping[Labels, RuleKind]:
        return self._exact

    @property
    def wildcard_rules(self) -> Mapping[Labels, RuleKind]:
        return self._wildcard

    @property
    def exception_rules(self) -> Mapping[Labels, RuleKind]:
        return self._exception

    def lookup_exact(self, labels: Labels) -> Optional[RuleKind]:
        return self._exact.get(labels)

    def lookup_wildcard(self, labels: Labels) -> Optional[RuleKind]:
        """Look up a wildcard rule; labels[0] must already be "*"."""
        return self._wildcard.get(labels)

    def lookup_exception(self, labels: Labels) -> Optional[RuleKind]:
        return self._exception.get(labels)

    def rules(self) -> Iterator[Rule]:
        """Yield every rule in the store."""
        for rule_type, rule_map in (
            (RuleType.EXACT, self._exact),
            (RuleType.WILDCARD, self._wildcard),
            (RuleType.EXCEPTION, self._exception),
        ):
            for labels, kind in rule_map.items():
                yield Rule(labels=labels, kind=kind, rule_type=rule_type)

    def __len__(self) -> int:
        return len(self._exact) + len(self._wildcard) + len(self._exception)

    def __repr__(self) -> str:
        return (
            f"RuleStore(exact={len(self._exact)}, wildcard={len(self._wildcard)}, "
            f"exception={len(self._exception)})"
        )


def parse_rule(text: str, kind: RuleKind, line_number: int = 0) -> Rule:
    """
    Parse a single rule string.

    Args:
        text: Rule as written in the list (e.g., "co.uk", "*.ck", "!www.ck")
        kind: Origin of the rule
        line_number: Source line, used in error messages

    Returns:
        The parsed Rule

    Raises:
        RuleStoreError: If the rule is malformed
    """
    rule_text = text.lower()
    is_exception = rule_text.startswith(EXCEPTION_PREFIX)
    if is_exception:
        rule_text = rule_text[len(EXCEPTION_PREFIX):]

    labels = tuple(rule_text.split(LABEL_SEPARATOR))
    if any(not label for label in labels):
        raise RuleStoreError(f"Line {line_number}: empty label in rule '{text}'")

    if is_exception:
        if WILDCARD_LABEL in labels:
            raise RuleStoreError(f"Line {line_number}: wildcard in exception rule '{text}'")
        # The leftmost label is dropped when applied, so something must remain
        if len(labels) < 2:
            raise RuleStoreError(f"Line {line_number}: exception rule '{text}' needs two labels")
        return Rule(labels=labels, kind=kind, rule_type=RuleType.EXCEPTION)

    # Only a leftmost wildcard is supported
    if WILDCARD_LABEL in labels[1:]:
        raise RuleStoreError(f"Line {line_number}: unsupported wildcard position in rule '{text}'")

    if labels[0] == WILDCARD_LABEL:
        return Rule(labels=labels, kind=kind, rule_type=RuleType.WILDCARD)
    return Rule(labels=labels, kind=kind, rule_type=RuleType.EXACT)


def parse_rules(text: str) -> RuleStore:
    """
    Parse suffix list text into a RuleStore.

    Rules before the first section marker are treated as ICANN rules.
    When a rule appears twice, the first occurrence wins.

    Raises:
        RuleStoreError: If any rule is malformed
    """
    maps: dict[RuleType, dict[Labels, RuleKind]] = {
        RuleType.EXACT: {},
        RuleType.WILDCARD: {},
        RuleType.EXCEPTION: {},
    }
    kind = RuleKind.ICANN

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()

        # Skip blank lines
        if not line:
            continue

        # Comments, some of which switch sections
        if line.startswith(COMMENT_PREFIX):
            marker = line[len(COMMENT_PREFIX):].strip()
            if marker == BEGIN_PRIVATE_MARKER:
                kind = RuleKind.PRIVATE
            elif marker in (BEGIN_ICANN_MARKER, END_ICANN_MARKER, END_PRIVATE_MARKER):
                kind = RuleKind.ICANN
            continue

        # A rule is the first token on the line; anything after whitespace is ignored
        rule = parse_rule(line.split()[0], kind, line_number)
        maps[rule.rule_type].setdefault(rule.labels, rule.kind)

    return RuleStore(
        exact=maps[RuleType.EXACT],
        wildcard=maps[RuleType.WILDCARD],
        exception=maps[RuleType.EXCEPTION],
    )


def _get_psl_path() -> Path:
    """Get the path to the bundled PSL data file."""
    return DEFAULT_PSL_FILE


def load_rule_store(path: Path | str | None = None) -> RuleStore:
    """
    Load and parse a suffix list file.

    The path is resolved before the cache lookup, so every spelling of the
    same file shares one RuleStore and each file is read once per process.

    Args:
        path: Suffix list file; defaults to the bundled list

    Returns:
        RuleStore built from the file

    Raises:
        RuleStoreError: If the file is missing, unreadable or malformed
    """
    psl_path = Path(path) if path is not None else _get_psl_path()
    return _load_resolved(psl_path.expanduser().resolve())


@lru_cache(maxsize=None)
def _load_resolved(psl_path: Path) -> RuleStore:
    if not psl_path.exists():
        raise RuleStoreError(f"PSL data file not found at {psl_path}")

    try:
        with open(psl_path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RuleStoreError(f"Failed to read PSL file {psl_path}: {e}") from e

    store = parse_rules(text)
    logger.info(
        "Loaded PSL: %d exact, %d wildcard, %d exception rules from %s",
        len(store.exact_rules),
        len(store.wildcard_rules),
        len(store.exception_rules),
        psl_path,
    )
    return store


def get_default_rule_store() -> RuleStore:
    """Return the shared store built from the bundled list."""
    return load_rule_store(None)


def clear_cache() -> None:
    """Clear the LRU cache for testing purposes."""
    _load_resolved.cache_clear()
