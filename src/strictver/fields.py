# SPDX-License-Identifier: MIT
"""Pydantic field type for semantic versions.

Example:
    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: VersionField
    >>> Release(version="1.0.0-rc.1").version
    Version(major=1, minor=0, patch=0, prerelease='rc.1', build=None)
    >>> Release(version="1.0.0-rc.1").model_dump(mode="json")
    {'version': '1.0.0-rc.1'}
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .parser import SEMVER_PATTERN, ParseError, parse_version
from .version import Version

# JSON Schema patterns are ECMA-262 regexes, which have no (?P<name>...) syntax
JSON_SCHEMA_PATTERN = re.sub(r"\(\?P<\w+>", "(?:", SEMVER_PATTERN.pattern)


def coerce_version(value: Any) -> Version:
    """Accept a Version as-is or parse a string strictly."""
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse_version(value)
    raise ParseError(str(value), f"Expected a version string, got {type(value).__name__}")


class _VersionPydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            coerce_version,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": JSON_SCHEMA_PATTERN}


VersionField = Annotated[Version, _VersionPydanticAnnotation]
