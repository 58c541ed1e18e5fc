"""Services module for version normalization.

The service sits between the API endpoints and the normalization core. It branches on the
parse result, turning a malformed version into an HTTP error for single lookups and into an
error entry for batches, so the routers only ever see clean response models.
"""

import logging

from fastapi import HTTPException
from nuget_version.routes.v1.versions.schema import PackageVersionInput, PackageVersionOutput, VersionOutput
from nuget_version.utils.version import MalformedVersion, normalize, parse

logger = logging.getLogger(__name__)


class InvalidVersion(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=400, detail=detail)


async def get_version_service() -> "VersionService":
    return VersionService()


class VersionService:
    def describe(self, raw_version: str) -> VersionOutput:
        result = parse(raw_version)
        if isinstance(result, MalformedVersion):
            logger.info(f"Rejected version {raw_version!r}")
            raise InvalidVersion(result.message)
        return VersionOutput.from_components(version=raw_version, normalized=normalize(result), components=result)

    def normalize_many(self, items: list[PackageVersionInput]) -> list[PackageVersionOutput]:
        outputs = []
        for item in items:
            result = parse(item.version)
            if isinstance(result, MalformedVersion):
                logger.info(f"Rejected version {item.version!r} for package {item.package_id}")
                outputs.append(PackageVersionOutput(package_id=item.package_id, version=item.version, error=result.message))
                continue
            outputs.append(
                PackageVersionOutput(package_id=item.package_id, version=item.version, normalized=normalize(result))
            )
        return outputs
