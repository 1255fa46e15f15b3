# SPDX-License-Identifier: MIT
"""Version comparison helpers that accept strings or Version objects.

Build metadata is ignored in comparisons, as SemVer 2.0.0 requires.
"""

from __future__ import annotations

from typing import Union

from .ordering import Ordering, compare_precedence
from .parser import parse_version
from .version import Version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        <Ordering.GREATER: 1>
        >>> compare_versions("2.0.0+build.1848", "2.0.0")
        <Ordering.EQUAL: 0>
    """
    return compare_precedence(_coerce(version1), _coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like ``compare_versions``; versions differing only in
    build metadata get equal keys.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # No pre-release becomes (1,) to sort after every pre-release.
    # Numeric identifiers are tagged 0 so they sort before alphanumeric ones.
    if not v.prerelease_identifiers:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease_identifiers:
            if identifier.is_numeric:
                parts.append((0, identifier.number, ""))
            else:
                parts.append((1, 0, identifier.text))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def max_version(*versions: VersionLike) -> Version:
    """Return the version with the highest precedence.

    The earliest argument wins among versions of equal precedence.

    Raises:
        ValueError: If called without arguments
        ParseError: If any version string is invalid
    """
    if not versions:
        raise ValueError("max_version() requires at least one version")
    best = _coerce(versions[0])
    for candidate in map(_coerce, versions[1:]):
        if compare_precedence(candidate, best) is Ordering.GREATER:
            best = candidate
    return best


def min_version(*versions: VersionLike) -> Version:
    """Return the version with the lowest precedence.

    The earliest argument wins among versions of equal precedence.

    Raises:
        ValueError: If called without arguments
        ParseError: If any version string is invalid
    """
    if not versions:
        raise ValueError("min_version() requires at least one version")
    best = _coerce(versions[0])
    for candidate in map(_coerce, versions[1:]):
        if compare_precedence(candidate, best) is Ordering.LESS:
            best = candidate
    return best
