# SPDX-License-Identifier: MIT
"""Strict parsing of SemVer 2.0.0 version strings.

Accepted shape: MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]

- MAJOR, MINOR, PATCH: "0" or digits without a leading zero, any width
- PRERELEASE: dot-separated identifiers, each "0", a number without a
  leading zero, or an alphanumeric identifier ([0-9A-Za-z-] with at least
  one non-digit)
- BUILD: dot-separated non-empty identifiers over [0-9A-Za-z-]; leading
  zeros are allowed

Nothing is normalized: surrounding whitespace, trailing newlines and
non-ASCII characters are all rejected.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .version import Version

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Character classes are spelled out instead of \d so that non-ASCII digits
# never match. Always apply with fullmatch(): "$" alone admits a trailing "\n".
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class ParseError(ValueError):
    """Raised when a version string does not follow semantic versioning.

    Attributes:
        version: The rejected input, unmodified
        message: Human-readable description of the failure
    """

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("2.0.0-rc.1+build.123")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.123')
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if match is None:
        logger.debug("Rejected version string %r", version_string)
        raise ParseError(version_string)

    try:
        return Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
            build=match.group("buildmetadata"),
        )
    except ValueError as e:
        # int() refuses numbers beyond the interpreter's digit limit
        logger.debug("Numeric field out of range in %r: %s", version_string, e)
        raise ParseError(
            version_string, f"Numeric field too large in version: {version_string!r}"
        ) from e


def is_valid_semver(version_string: Any) -> bool:
    """Check if a value is a valid semantic version string.

    Never raises, whatever the argument.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver(" 1.0.0")
        False
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
