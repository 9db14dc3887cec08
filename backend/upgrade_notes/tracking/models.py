from pydantic import BaseModel

from upgrade_notes.configs.constants import UpdateDirection


class TrackedUpdate(BaseModel):
    """Version transition of one package observed during an update pass."""

    from_version: str  # normalized, e.g. "2.0.1.0"
    from_pretty: str  # as displayed, e.g. "2.0.1" or "dev-master"
    to_version: str
    to_pretty: str
    direction: UpdateDirection

    @property
    def is_upgrade(self) -> bool:
        return self.direction == UpdateDirection.UPGRADE
