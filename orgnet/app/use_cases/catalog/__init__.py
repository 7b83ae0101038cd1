"""
Catalog Use Cases
"""

from .create_package_use_case import CreatePackageUseCase
from .dtos import CreatePackageCommand, PackageResponse, UpdatePackageCommand
from .get_package_use_case import GetPackageUseCase, ListPackagesUseCase
from .package_fields import normalize_package_fields
from .update_package_use_case import UpdatePackageUseCase

__all__ = [
    "CreatePackageUseCase",
    "UpdatePackageUseCase",
    "GetPackageUseCase",
    "ListPackagesUseCase",
    "CreatePackageCommand",
    "UpdatePackageCommand",
    "PackageResponse",
    "normalize_package_fields",
]
