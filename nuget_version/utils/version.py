"""NuGet package version parsing and normalization.

See https://learn.microsoft.com/en-us/nuget/concepts/package-versioning#normalized-version-numbers

A raw version is parsed into VersionComponents and rebuilt in its normalized form:
leading zeros are stripped from numeric parts, a zero revision is dropped and build
metadata is never emitted. e.g. "01.02.03.00+build.5" -> "1.2.3"
"""

import re
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints, model_validator

VERSION_PATTERN = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)"
    r"(?:\.(?P<patch>[0-9]+)(?:\.(?P<revision>[0-9]+))?)?"
    r"(?:-(?P<label>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?",
    re.ASCII,
)
LEADING_ZEROS_PATTERN = re.compile(r"^0+(?!$)")

Digits = Annotated[str, StringConstraints(pattern=r"^[0-9]+$")]
Identifier = Annotated[str, StringConstraints(pattern=r"^[0-9A-Za-z-]+$")]


class VersionComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    major: Digits
    minor: Digits
    patch: Digits | None = None
    revision: Digits | None = None
    label: tuple[Identifier, ...] | None = None
    metadata: tuple[Identifier, ...] | None = None

    @model_validator(mode="after")
    def check_shape(self):
        if self.revision is not None and self.patch is None:
            raise ValueError("revision requires a patch component")
        if self.label == () or self.metadata == ():
            raise ValueError("label and metadata must not be empty when present")
        return self


class MalformedVersion(BaseModel):
    """Returned by parse() when the raw string does not match the version grammar."""

    model_config = ConfigDict(frozen=True)

    raw: str

    @property
    def message(self) -> str:
        return f"Unexpected version format: {self.raw}"


ParseResult = VersionComponents | MalformedVersion


def _identifiers(group: str | None) -> tuple[str, ...] | None:
    return tuple(group.split(".")) if group is not None else None


def parse(raw: str) -> ParseResult:
    """Parse a raw version string.

    The whole string must match, otherwise a MalformedVersion is returned instead of raising.
    """
    match = VERSION_PATTERN.fullmatch(raw)
    if match is None:
        return MalformedVersion(raw=raw)
    return VersionComponents(
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        revision=match.group("revision"),
        label=_identifiers(match.group("label")),
        metadata=_identifiers(match.group("metadata")),
    )


def strip_leading_zeros(digits: str) -> str:
    """Remove leading zeros from a digit string, keeping the last digit. e.g. "007" -> "7", "00" -> "0" """
    return LEADING_ZEROS_PATTERN.sub("", digits, count=1)


def normalize(components: VersionComponents) -> str:
    normalized = f"{strip_leading_zeros(components.major)}.{strip_leading_zeros(components.minor)}"
    if components.patch is not None:
        normalized += f".{strip_leading_zeros(components.patch)}"
    if components.revision is not None:
        revision = strip_leading_zeros(components.revision)
        if revision != "0":
            normalized += f".{revision}"
    if components.label is not None:
        normalized += "-" + ".".join(components.label)
    # build metadata is never part of the normalized form
    return normalized


def normalize_version(raw: str) -> str:
    """Parse and normalize a raw version, raising ValueError when it is malformed."""
    result = parse(raw)
    if isinstance(result, MalformedVersion):
        raise ValueError(result.message)
    return normalize(result)


NormalizedNugetVersion = Annotated[str, BeforeValidator(normalize_version)]
