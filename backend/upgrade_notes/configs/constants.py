from enum import Enum


class UpdateDirection(str, Enum):
    UPGRADE = "up"
    DOWNGRADE = "down"


class PackageOperationType(str, Enum):
    INSTALL = "install"
    UPDATE = "update"
    UNINSTALL = "uninstall"


# Matches "numeric looking" versions such as 2.0 or 2.0.10, anchored at the start.
# Trailing suffixes (2.0.10-beta) are tolerated but not captured.
NUMERIC_VERSION_PATTERN = r"^\d+\.\d+(?:\.\d+)*"

GITHUB_BASE_URL = "https://github.com"
