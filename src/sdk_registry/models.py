# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
SDK Registry Data Models

Defines pattern sets, remote listing pages and resolved assets. Pattern sets
are plain immutable dataclasses built once from the patterns file; listing
and asset models are pydantic models because they cross the wire (registry
JSON in, CLI JSON out).
"""

import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD_TYPE = "*"


class SdkType:
    """SDK type a pattern set applies to: one specific type, or any type."""

    def accepts(self, sdk_type: str) -> bool:
        raise NotImplementedError

    @staticmethod
    def parse(value: Union[str, "SdkType"]) -> "SdkType":
        """
        Build a type selector from its patterns-file spelling.

        Args:
            value: "*" for any type, otherwise the SDK type name

        Returns:
            AnyType or SpecificType
        """
        if isinstance(value, SdkType):
            return value
        if value == WILDCARD_TYPE:
            return ANY_TYPE
        if not value:
            raise ValueError("SDK type cannot be empty")
        return SpecificType(value)


@dataclass(frozen=True)
class SpecificType(SdkType):
    """Applies only to the named SDK type."""
    name: str

    def accepts(self, sdk_type: str) -> bool:
        return self.name == sdk_type

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AnyType(SdkType):
    """Applies to every SDK type (generic fallback patterns)."""

    def accepts(self, sdk_type: str) -> bool:
        return True

    def __str__(self) -> str:
        return WILDCARD_TYPE


ANY_TYPE = AnyType()


@dataclass(frozen=True)
class PatternSet:
    """
    Named, type-tagged, ordered list of regexes recognising one
    distribution's version-in-filename convention.

    Each regex is expected to hold exactly one capturing group whose match
    is the version. Regex order is significant: the first match wins.
    """
    name: str
    sdk_type: SdkType
    patterns: Tuple[str, ...]
    description: str = ""

    def __post_init__(self):
        """Validate and normalize pattern set fields"""
        if not self.name:
            raise ValueError("Pattern set name cannot be empty")

        object.__setattr__(self, "sdk_type", SdkType.parse(self.sdk_type))

        if isinstance(self.patterns, str):
            raise ValueError(f"Pattern set '{self.name}': patterns must be a list, not a string")
        object.__setattr__(self, "patterns", tuple(self.patterns))

        if not self.patterns:
            raise ValueError(f"Pattern set '{self.name}' has no patterns")

        for regex in self.patterns:
            if not isinstance(regex, str):
                raise ValueError(
                    f"Pattern set '{self.name}': pattern {regex!r} must be a string"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the patterns-file representation"""
        return {
            "name": self.name,
            "type": str(self.sdk_type),
            "description": self.description,
            "patterns": list(self.patterns),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatternSet":
        """Create PatternSet from a patterns-file table"""
        return cls(
            name=data.get("name", ""),
            sdk_type=data.get("type", ""),
            patterns=data.get("patterns", ()),
            description=data.get("description", ""),
        )


class Extraction(NamedTuple):
    """Successful version extraction from a path"""
    version: str
    pattern_name: str


@dataclass(frozen=True)
class Credentials:
    """HTTP Basic credentials for a registry"""
    username: str = ""
    password: str = field(default="", repr=False)

    @property
    def is_complete(self) -> bool:
        """Credentials are only sent when both parts are present."""
        return bool(self.username) and bool(self.password)

    def as_auth(self) -> Optional[Tuple[str, str]]:
        """Return an httpx auth tuple, or None for anonymous requests"""
        if not self.is_complete:
            return None
        return (self.username, self.password)


class ListingItem(BaseModel):
    """One asset in a remote registry listing"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str
    download_url: str = Field(default="", alias="downloadUrl")
    checksum: Dict[str, str] = Field(default_factory=dict)

    @field_validator("download_url", mode="before")
    @classmethod
    def null_url_is_empty(cls, value: Optional[str]) -> str:
        return value or ""

    @field_validator("checksum", mode="before")
    @classmethod
    def null_checksum_is_empty(cls, value: Optional[Dict[str, str]]) -> Dict[str, str]:
        return value or {}


class ListingPage(BaseModel):
    """One page of a paginated listing"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: List[ListingItem] = Field(default_factory=list)
    continuation_token: Optional[str] = Field(default=None, alias="continuationToken")

    @field_validator("continuation_token")
    @classmethod
    def empty_token_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @property
    def is_last(self) -> bool:
        return self.continuation_token is None


class ResolvedAsset(BaseModel):
    """A listing item whose path yielded a version"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: str
    download_url: str = Field(alias="downloadUrl")
    pattern_name: str = Field(alias="patternName")
    path: str = ""

    @property
    def filename(self) -> str:
        return posixpath.basename(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output"""
        data = self.model_dump(by_alias=True)
        data["filename"] = self.filename
        return data
