"""Settings bundle for a single update session."""

from pydantic import BaseModel
from pydantic import Field

from upgrade_notes.configs.app_configs import DEFAULT_NOTES_BRANCH
from upgrade_notes.configs.app_configs import MAX_DISPLAYED_NOTE_LINES
from upgrade_notes.configs.app_configs import NOTES_GITHUB_BASE_URL
from upgrade_notes.configs.app_configs import NOTES_GITHUB_ORG
from upgrade_notes.configs.app_configs import NOTES_PRODUCT_NAME
from upgrade_notes.configs.app_configs import TRACKED_PACKAGES
from upgrade_notes.configs.app_configs import UPGRADE_NOTES_FILENAME
from upgrade_notes.configs.app_configs import VENDOR_DIR


class UpgradeNotesSettings(BaseModel):
    """Defaults come from the environment (see app_configs), callers may override any field."""

    tracked_packages: list[str] = Field(default_factory=lambda: list(TRACKED_PACKAGES))
    vendor_dir: str = VENDOR_DIR
    notes_filename: str = UPGRADE_NOTES_FILENAME
    product_name: str = NOTES_PRODUCT_NAME
    max_note_lines: int = Field(default=MAX_DISPLAYED_NOTE_LINES, ge=0)
    github_base_url: str = NOTES_GITHUB_BASE_URL
    github_org: str | None = NOTES_GITHUB_ORG
    default_branch: str = DEFAULT_NOTES_BRANCH
