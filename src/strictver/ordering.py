# SPDX-License-Identifier: MIT
"""Precedence ordering of semantic versions.

Versions are ordered by MAJOR, MINOR and PATCH compared numerically, then by
pre-release:

- A version without a pre-release outranks any version with one
  (1.0.0-rc.1 < 1.0.0).
- Pre-releases are compared identifier by identifier. Numeric identifiers
  compare numerically (beta.2 < beta.11), alphanumeric identifiers compare
  in ASCII order, and a numeric identifier is always lower than an
  alphanumeric one (alpha.1 < alpha.beta).
- When one pre-release is a prefix of the other, the shorter one is lower
  (alpha < alpha.1).

Build metadata never takes part in precedence.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Sequence

from .identifiers import Identifier

if TYPE_CHECKING:
    from .version import Version


class Ordering(IntEnum):
    """Result of a precedence comparison.

    Members compare equal to -1, 0 and 1 so callers may treat the result as
    a classic ``cmp`` value.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)

    @classmethod
    def of(cls, left: Any, right: Any) -> Ordering:
        """Order two mutually comparable values."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


def compare_identifiers(left: Identifier, right: Identifier) -> Ordering:
    """Compare two pre-release identifiers."""
    if left.is_numeric and right.is_numeric:
        return Ordering.of(left.number, right.number)
    if left.is_numeric:
        return Ordering.LESS
    if right.is_numeric:
        return Ordering.GREATER
    return Ordering.of(left.text, right.text)


def compare_prerelease(
    left: Sequence[Identifier], right: Sequence[Identifier]
) -> Ordering:
    """Compare two pre-release identifier sequences.

    An empty sequence means "no pre-release" and ranks above any non-empty
    one.
    """
    if not left and not right:
        return Ordering.EQUAL
    if not left:
        return Ordering.GREATER
    if not right:
        return Ordering.LESS

    for ours, theirs in zip(left, right):
        result = compare_identifiers(ours, theirs)
        if result is not Ordering.EQUAL:
            return result

    # Common prefix agrees; more fields means higher precedence
    return Ordering.of(len(left), len(right))


def compare_precedence(left: Version, right: Version) -> Ordering:
    """Compare two versions by precedence, ignoring build metadata."""
    for attr in ("major", "minor", "patch"):
        result = Ordering.of(getattr(left, attr), getattr(right, attr))
        if result is not Ordering.EQUAL:
            return result

    return compare_prerelease(
        left.prerelease_identifiers, right.prerelease_identifiers
    )
