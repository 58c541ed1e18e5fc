"""Router module for version normalization endpoints.

The version arrives as a raw path segment and is handed to the service untouched; the
service decides whether it is a valid NuGet version.
"""

from fastapi import APIRouter, Depends
from nuget_version.routes.v1.versions.schema import PackageVersionInput, PackageVersionOutput, VersionOutput
from nuget_version.routes.v1.versions.service import VersionService, get_version_service

router = APIRouter()


@router.post("/versions/normalize", response_model=list[PackageVersionOutput])
async def normalize_versions(
    items: list[PackageVersionInput],
    version_service: VersionService = Depends(get_version_service),
) -> list[PackageVersionOutput]:
    """Normalize a batch of package versions. Malformed versions are reported per item."""
    return version_service.normalize_many(items)


@router.get("/versions/{raw_version}", response_model=VersionOutput)
async def describe_version(
    raw_version: str,
    version_service: VersionService = Depends(get_version_service),
) -> VersionOutput:
    """Return the normalized form and components of a raw version."""
    return version_service.describe(raw_version)
