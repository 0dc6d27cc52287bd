"""Tests for the rule matching engine."""

from __future__ import annotations

from publicsuffix.core.matcher import find_prevailing_rule, select_suffix
from publicsuffix.core.models import DEFAULT_RULE, RuleKind, RuleType
from publicsuffix.core.rule_store import RuleStore

ALL_KINDS = frozenset({RuleKind.ICANN, RuleKind.PRIVATE})
ICANN_ONLY = frozenset({RuleKind.ICANN})


def suffix(labels, store, kinds=ALL_KINDS):
    return select_suffix(labels, 0, kinds, store)


def registrable(labels, store, kinds=ALL_KINDS):
    return select_suffix(labels, 1, kinds, store)


class TestExactRules:
    """Tests for matching exact rules."""

    def test_single_label_rule(self, sample_store) -> None:
        """A TLD rule yields the TLD as suffix."""
        assert suffix(("foo", "bar", "com"), sample_store) == ("com",)
        assert registrable(("foo", "bar", "com"), sample_store) == ("bar", "com")

    def test_longest_rule_wins(self, sample_store) -> None:
        """co.uk beats uk."""
        assert suffix(("www", "example", "co", "uk"), sample_store) == ("co", "uk")
        assert registrable(("www", "example", "co", "uk"), sample_store) == ("example", "co", "uk")

    def test_domain_equal_to_rule(self, sample_store) -> None:
        """A bare suffix is its own suffix but has no registrable domain."""
        assert suffix(("com",), sample_store) == ("com",)
        assert registrable(("com",), sample_store) is None
        assert registrable(("co", "uk"), sample_store) is None

    def test_keeps_label_order(self, sample_store) -> None:
        """Results are trailing labels in their original order."""
        assert registrable(("a", "b", "c", "co", "uk"), sample_store) == ("c", "co", "uk")


class TestWildcardRules:
    """Tests for matching wildcard rules."""

    def test_wildcard_covers_any_label(self, sample_store) -> None:
        """*.kawasaki.jp makes every child of kawasaki.jp a suffix."""
        assert suffix(("foo", "kawasaki", "jp"), sample_store) == ("foo", "kawasaki", "jp")
        assert registrable(("foo", "kawasaki", "jp"), sample_store) is None
        assert registrable(("a", "foo", "kawasaki", "jp"), sample_store) == ("a", "foo", "kawasaki", "jp")

    def test_wildcard_parent_without_exact_rule(self, sample_store) -> None:
        """With only *.ck, the bare TLD falls back to the default rule."""
        assert suffix(("ck",), sample_store) == ("ck",)
        assert find_prevailing_rule(("ck",), ALL_KINDS, sample_store) is DEFAULT_RULE
        assert suffix(("test", "ck"), sample_store) == ("test", "ck")
        assert registrable(("b", "test", "ck"), sample_store) == ("b", "test", "ck")

    def test_wildcard_rule_reported_with_star(self, sample_store) -> None:
        """The prevailing wildcard rule keeps its star label."""
        rule = find_prevailing_rule(("foo", "kawasaki", "jp"), ALL_KINDS, sample_store)
        assert rule.labels == ("*", "kawasaki", "jp")
        assert rule.rule_type is RuleType.WILDCARD
        assert rule.kind is RuleKind.ICANN


class TestExceptionRules:
    """Tests for matching exception rules."""

    def test_exception_overrides_wildcard(self, sample_store) -> None:
        """!city.kawasaki.jp makes city.kawasaki.jp registrable."""
        assert suffix(("city", "kawasaki", "jp"), sample_store) == ("kawasaki", "jp")
        assert registrable(("city", "kawasaki", "jp"), sample_store) == ("city", "kawasaki", "jp")
        assert registrable(("www", "city", "kawasaki", "jp"), sample_store) == ("city", "kawasaki", "jp")

    def test_exception_under_wildcard_tld(self, sample_store) -> None:
        """!www.ck makes www.ck registrable."""
        assert suffix(("www", "ck"), sample_store) == ("ck",)
        assert registrable(("www", "www", "ck"), sample_store) == ("www", "ck")

    def test_exception_beats_longer_normal_rule(self) -> None:
        """Exceptions win regardless of length."""
        store = RuleStore(
            exact={("a", "b", "c", "d"): RuleKind.ICANN},
            exception={("c", "d"): RuleKind.ICANN},
        )
        rule = find_prevailing_rule(("a", "b", "c", "d"), ALL_KINDS, store)
        assert rule.rule_type is RuleType.EXCEPTION
        assert suffix(("a", "b", "c", "d"), store) == ("d",)

    def test_longest_exception_wins(self) -> None:
        """Among exceptions, the most specific one prevails."""
        store = RuleStore(
            exception={
                ("x", "y", "z"): RuleKind.ICANN,
                ("y", "z"): RuleKind.ICANN,
            },
        )
        rule = find_prevailing_rule(("w", "x", "y", "z"), ALL_KINDS, store)
        assert rule.labels == ("x", "y", "z")
        assert suffix(("w", "x", "y", "z"), store) == ("y", "z")


class TestKindFiltering:
    """Tests for excluding PRIVATE rules."""

    def test_private_rule_used_by_default(self, sample_store) -> None:
        """PRIVATE rules take part unless excluded."""
        assert suffix(("foo", "github", "io"), sample_store) == ("github", "io")
        assert registrable(("foo", "github", "io"), sample_store) == ("foo", "github", "io")

    def test_private_rule_ignored(self, sample_store) -> None:
        """Excluded PRIVATE rules fall back to the next ICANN rule."""
        assert suffix(("foo", "github", "io"), sample_store, ICANN_ONLY) == ("io",)
        assert registrable(("foo", "github", "io"), sample_store, ICANN_ONLY) == ("github", "io")

    def test_private_exception_ignored(self, sample_store) -> None:
        """Excluded exception rules are absent, not lower priority."""
        assert suffix(("www", "hosted", "io"), sample_store) == ("hosted", "io")
        assert suffix(("www", "hosted", "io"), sample_store, ICANN_ONLY) == ("io",)

    def test_private_wildcard_ignored(self, sample_store) -> None:
        """Excluded wildcard rules never match."""
        assert suffix(("a", "hosted", "io"), sample_store) == ("a", "hosted", "io")
        assert suffix(("a", "hosted", "io"), sample_store, ICANN_ONLY) == ("io",)

    def test_no_kinds_allowed_uses_default(self, sample_store) -> None:
        """With nothing allowed, only the default rule applies."""
        assert find_prevailing_rule(("foo", "co", "uk"), frozenset(), sample_store) is DEFAULT_RULE


class TestDefaultRule:
    """Tests for domains no rule matches."""

    def test_unlisted_tld(self, sample_store) -> None:
        """Unlisted TLDs behave as if listed."""
        assert suffix(("example", "example"), sample_store) == ("example",)
        assert registrable(("example", "example"), sample_store) == ("example", "example")
        assert registrable(("example",), sample_store) is None

    def test_empty_label(self, sample_store) -> None:
        """An empty domain matches nothing and has no registrable domain."""
        assert suffix(("",), sample_store) == ("",)
        assert registrable(("",), sample_store) is None

    def test_empty_store(self) -> None:
        """Every domain gets the default rule from an empty store."""
        assert suffix(("foo", "bar", "com"), RuleStore()) == ("com",)
