"""Schema definitions for version normalization requests and responses."""

from pydantic import BaseModel
from nuget_version.utils.nuget import NormalizedNugetPackageId
from nuget_version.utils.version import VersionComponents


def join_identifiers(identifiers: tuple[str, ...] | None) -> str | None:
    return ".".join(identifiers) if identifiers is not None else None


class VersionOutput(BaseModel):
    version: str  # Raw version as received
    normalized: str
    major: str
    minor: str
    patch: str | None = None
    revision: str | None = None
    label: str | None = None
    metadata: str | None = None

    @classmethod
    def from_components(cls, version: str, normalized: str, components: VersionComponents) -> "VersionOutput":
        return cls(
            version=version,
            normalized=normalized,
            major=components.major,
            minor=components.minor,
            patch=components.patch,
            revision=components.revision,
            label=join_identifiers(components.label),
            metadata=join_identifiers(components.metadata),
        )


class PackageVersionInput(BaseModel):
    package_id: NormalizedNugetPackageId
    version: str


class PackageVersionOutput(BaseModel):
    package_id: str
    version: str
    normalized: str | None = None
    error: str | None = None
