from typing import Annotated

from pydantic import BeforeValidator


def normalize_package_id(package_id: str) -> str:
    """Normalize a NuGet package id.

    NuGet ids are case-insensitive, so the registry addresses packages by the lowercased id.
    e.g. " Newtonsoft.Json " -> "newtonsoft.json"
    """
    return package_id.strip().lower()


NormalizedNugetPackageId = Annotated[str, BeforeValidator(normalize_package_id)]
