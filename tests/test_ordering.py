# SPDX-License-Identifier: MIT
"""Unit tests for identifiers and the precedence engine."""

from strictver import (
    Identifier,
    Ordering,
    Version,
    compare_identifiers,
    compare_precedence,
    compare_prerelease,
    parse_identifier,
    split_identifiers,
)


class TestIdentifiers:
    """Tests for identifier classification."""

    def test_numeric(self):
        """Digit-only identifiers carry their integer value."""
        identifier = parse_identifier("11")
        assert identifier == Identifier("11", 11)
        assert identifier.is_numeric

    def test_zero(self):
        """Zero is numeric."""
        assert parse_identifier("0").number == 0

    def test_alphanumeric(self):
        """Any non-digit makes an identifier alphanumeric."""
        for text in ("alpha", "0valid", "-", "0A", "123-"):
            identifier = parse_identifier(text)
            assert not identifier.is_numeric
            assert identifier.number is None

    def test_str(self):
        """str() returns the identifier text."""
        assert str(parse_identifier("rc")) == "rc"

    def test_split(self):
        """A dotted pre-release splits into identifiers in order."""
        identifiers = split_identifiers("alpha.beta.1")
        assert [str(i) for i in identifiers] == ["alpha", "beta", "1"]

    def test_split_none(self):
        """No pre-release yields no identifiers."""
        assert split_identifiers(None) == ()


class TestOrdering:
    """Tests for the Ordering enum."""

    def test_values(self):
        """Members carry cmp-style values."""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1

    def test_reverse(self):
        """reverse swaps LESS and GREATER and keeps EQUAL."""
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.GREATER.reverse() is Ordering.LESS
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL

    def test_of(self):
        """of orders plain values."""
        assert Ordering.of(1, 2) is Ordering.LESS
        assert Ordering.of("b", "a") is Ordering.GREATER
        assert Ordering.of(3, 3) is Ordering.EQUAL


class TestCompareIdentifiers:
    """Tests for single identifier comparison."""

    def test_numeric_pair(self):
        """Numeric identifiers compare by value."""
        assert compare_identifiers(parse_identifier("2"), parse_identifier("11")) is Ordering.LESS

    def test_numeric_before_alphanumeric(self):
        """Numeric is lower regardless of which side it is on."""
        num, alpha = parse_identifier("99"), parse_identifier("a")
        assert compare_identifiers(num, alpha) is Ordering.LESS
        assert compare_identifiers(alpha, num) is Ordering.GREATER

    def test_alphanumeric_pair(self):
        """Alphanumeric identifiers compare in ASCII order."""
        assert compare_identifiers(parse_identifier("beta"), parse_identifier("alpha")) is Ordering.GREATER
        assert compare_identifiers(parse_identifier("Z"), parse_identifier("a")) is Ordering.LESS

    def test_equal(self):
        """Identical identifiers are equal."""
        assert compare_identifiers(parse_identifier("rc"), parse_identifier("rc")) is Ordering.EQUAL


class TestComparePrerelease:
    """Tests for pre-release sequence comparison."""

    def test_both_absent(self):
        """Two releases have equal pre-release precedence."""
        assert compare_prerelease((), ()) is Ordering.EQUAL

    def test_release_above_prerelease(self):
        """No pre-release outranks any pre-release."""
        pre = split_identifiers("rc.1")
        assert compare_prerelease((), pre) is Ordering.GREATER
        assert compare_prerelease(pre, ()) is Ordering.LESS

    def test_first_difference_decides(self):
        """Later identifiers do not matter once one differs."""
        assert compare_prerelease(
            split_identifiers("alpha.2.a"), split_identifiers("alpha.10")
        ) is Ordering.LESS

    def test_prefix_is_lower(self):
        """A strict prefix has lower precedence."""
        assert compare_prerelease(
            split_identifiers("alpha"), split_identifiers("alpha.0")
        ) is Ordering.LESS


class TestComparePrecedence:
    """Tests for full version precedence."""

    def test_lexicographic_numeric_triple(self):
        """A greater minor does not beat a smaller major."""
        assert compare_precedence(Version(1, 5, 0), Version(2, 0, 0)) is Ordering.LESS
        assert compare_precedence(Version(2, 0, 0), Version(1, 5, 9)) is Ordering.GREATER

    def test_prerelease_only_decides_on_equal_triple(self):
        """A pre-release of a higher triple still beats a lower release."""
        assert compare_precedence(Version(1, 0, 1, "alpha"), Version(1, 0, 0)) is Ordering.GREATER

    def test_build_ignored(self):
        """Build metadata never affects precedence."""
        assert compare_precedence(
            Version(1, 0, 0, "rc.1", "a"), Version(1, 0, 0, "rc.1", "zzz")
        ) is Ordering.EQUAL
