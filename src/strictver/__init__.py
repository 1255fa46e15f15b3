# SPDX-License-Identifier: MIT
"""Strict SemVer 2.0.0 versions: parsing, rendering and precedence.

Example:
    >>> from strictver import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> is_valid_semver("01.1.1")
    False
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .identifiers import (
    Identifier,
    parse_identifier,
    split_identifiers,
)
from .ordering import (
    Ordering,
    compare_identifiers,
    compare_prerelease,
    compare_precedence,
)
from .version import (
    Version,
    render_version,
)
from .parser import (
    ParseError,
    SEMVER_PATTERN,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    version_key,
    max_version,
    min_version,
)
from .fields import (
    VersionField,
)

__all__ = [
    # Identifiers
    "Identifier",
    "parse_identifier",
    "split_identifiers",
    # Ordering
    "Ordering",
    "compare_identifiers",
    "compare_prerelease",
    "compare_precedence",
    # Version value and rendering
    "Version",
    "render_version",
    # Parsing
    "ParseError",
    "SEMVER_PATTERN",
    "parse_version",
    "is_valid_semver",
    # Version comparison
    "compare_versions",
    "version_key",
    "max_version",
    "min_version",
    # Pydantic integration
    "VersionField",
]
