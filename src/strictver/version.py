# SPDX-License-Identifier: MIT
"""The Version value type and its canonical text form.

A Version can be built directly from its components or obtained from
``parse_version``. Direct construction does not validate anything: callers
passing components by hand are responsible for keeping them within the
SemVer 2.0.0 grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .identifiers import Identifier, split_identifiers
from .ordering import Ordering, compare_precedence


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Equality and hashing are structural over all five components, so
    ``1.0.0+a != 1.0.0+b``. The ordering operators follow SemVer precedence,
    which ignores build metadata, so ``1.0.0+a <= 1.0.0+b`` and
    ``1.0.0+b <= 1.0.0+a`` both hold. Use ``compare`` or
    ``has_same_precedence`` when precedence equality is what you need.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Optional dotted pre-release (e.g., "alpha.1", "rc.2")
        build: Optional dotted build metadata (e.g., "build.123", "20240101")
        prerelease_identifiers: The pre-release split into classified
            identifiers, empty when there is no pre-release
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None
    prerelease_identifiers: tuple[Identifier, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "prerelease_identifiers", split_identifiers(self.prerelease)
        )

    def __str__(self) -> str:
        return render_version(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) is not Ordering.LESS

    def compare(self, other: Version) -> Ordering:
        """Compare precedence with another version.

        Examples:
            >>> Version(1, 0, 0, "alpha").compare(Version(1, 0, 0))
            <Ordering.LESS: -1>
            >>> Version(2, 0, 0, build="1848").compare(Version(2, 0, 0))
            <Ordering.EQUAL: 0>
        """
        return compare_precedence(self, other)

    def has_same_precedence(self, other: Version) -> bool:
        """Return True if the versions differ at most in build metadata."""
        return compare_precedence(self, other) is Ordering.EQUAL

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tuple(self) -> tuple[int, int, int, Optional[str], Optional[str]]:
        """Return the five components as a plain tuple."""
        return (self.major, self.minor, self.patch, self.prerelease, self.build)


def render_version(version: Version) -> str:
    """Return the canonical string form of a version.

    For any string accepted by ``parse_version`` this reproduces the input
    exactly.

    Examples:
        >>> render_version(Version(1, 1, 2, "prerelease", "meta"))
        '1.1.2-prerelease+meta'
        >>> render_version(Version(2, 0, 0, build="build.1848"))
        '2.0.0+build.1848'
    """
    text = version.base_version
    if version.prerelease is not None:
        text += f"-{version.prerelease}"
    if version.build is not None:
        text += f"+{version.build}"
    return text
