"""Models for the package operations reported by the host dependency manager."""

from pydantic import BaseModel

from upgrade_notes.configs.constants import PackageOperationType


class PackageVersion(BaseModel):
    version: str  # normalized, e.g. "2.0.1.0" or "dev-master"
    pretty_version: str  # as displayed to the user, e.g. "2.0.1"


class PackageOperation(BaseModel):
    """A single install, update or uninstall performed by the host."""

    operation_type: PackageOperationType
    package_name: str
    initial: PackageVersion | None = None  # None for installs
    target: PackageVersion | None = None  # None for uninstalls
