"""Keeps the package updates seen during a single update pass."""

from upgrade_notes.configs.constants import UpdateDirection
from upgrade_notes.tracking.models import TrackedUpdate
from upgrade_notes.utils.logger import setup_logger
from upgrade_notes.utils.version import is_upgrade

logger = setup_logger()


class UpdateTracker:
    def __init__(self) -> None:
        self._updates: dict[str, TrackedUpdate] = {}  # package_name -> update

    def __contains__(self, package_name: object) -> bool:
        return package_name in self._updates

    def __len__(self) -> int:
        return len(self._updates)

    def record(
        self,
        package_name: str,
        from_version: str,
        from_pretty: str,
        to_version: str,
        to_pretty: str,
    ) -> TrackedUpdate:
        """Store (or overwrite) the update for a package and work out its direction."""
        direction = (
            UpdateDirection.UPGRADE
            if is_upgrade(from_version, to_version)
            else UpdateDirection.DOWNGRADE
        )
        update = TrackedUpdate(
            from_version=from_version,
            from_pretty=from_pretty,
            to_version=to_version,
            to_pretty=to_pretty,
            direction=direction,
        )
        self._updates[package_name] = update

        logger.debug(
            f"Tracked {direction.name.lower()} of {package_name}: "
            f"{from_pretty} -> {to_pretty}"
        )
        return update

    def get(self, package_name: str) -> TrackedUpdate | None:
        return self._updates.get(package_name)

    def package_names(self) -> list[str]:
        """Tracked package names in the order they were first recorded."""
        return list(self._updates)
