# SPDX-License-Identifier: MIT
"""Dot-separated identifiers used in pre-release and build metadata.

A pre-release such as ``alpha.1.0valid`` is a sequence of identifiers, each
either numeric (``1``) or alphanumeric (``alpha``, ``0valid``). The
distinction decides how identifiers are ordered, so it is made once when a
Version is built rather than on every comparison.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Digits only; leading zeros are not rejected here, that is the parser's job
DIGITS_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single pre-release identifier.

    Attributes:
        text: The identifier exactly as written
        number: Integer value for numeric identifiers, None for alphanumeric
    """

    text: str
    number: Optional[int] = None

    def __str__(self) -> str:
        return self.text

    @property
    def is_numeric(self) -> bool:
        """Return True if the identifier consists only of digits."""
        return self.number is not None


def parse_identifier(text: str) -> Identifier:
    """Classify a single identifier as numeric or alphanumeric.

    Examples:
        >>> parse_identifier("11")
        Identifier(text='11', number=11)
        >>> parse_identifier("0valid")
        Identifier(text='0valid', number=None)
    """
    if DIGITS_PATTERN.fullmatch(text):
        return Identifier(text, int(text))
    return Identifier(text)


def split_identifiers(dotted: Optional[str]) -> tuple[Identifier, ...]:
    """Split a dotted pre-release string into classified identifiers.

    Returns an empty tuple when there is no pre-release.
    """
    if dotted is None:
        return ()
    return tuple(parse_identifier(part) for part in dotted.split("."))

