"""Builds the report shown after an update for a single tracked package."""

from upgrade_notes.configs.settings import UpgradeNotesSettings
from upgrade_notes.notes.constants import DOWNGRADED_ACTION
from upgrade_notes.notes.constants import INTRO_TEMPLATE
from upgrade_notes.notes.constants import NOTES_TOO_LONG_WARNING
from upgrade_notes.notes.constants import ONLINE_NOTES_INTRO
from upgrade_notes.notes.constants import ONLINE_NOTES_URL_TEMPLATE
from upgrade_notes.notes.constants import POLICY_NOTE
from upgrade_notes.notes.constants import UPGRADED_ACTION
from upgrade_notes.notes.extraction import find_upgrade_notes
from upgrade_notes.notes.storage import NotesStorage
from upgrade_notes.tracking.models import TrackedUpdate
from upgrade_notes.tracking.update_tracker import UpdateTracker
from upgrade_notes.utils.version import is_numeric_version


def _strip_blank_edges(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


class UpgradeNotesReporter:
    def __init__(
        self,
        tracker: UpdateTracker,
        storage: NotesStorage,
        settings: UpgradeNotesSettings | None = None,
    ) -> None:
        self.tracker = tracker
        self.storage = storage
        self.settings = settings or UpgradeNotesSettings()

    def report(self, package_name: str) -> list[str] | None:
        """Display lines for a package, or None if there is nothing worth showing.

        Notes are only extracted on upgrades from a release version, otherwise
        there is no reliable anchor in the notes document. Downgrades and
        upgrades from branch aliases still get the intro and the link.
        """
        update = self.tracker.get(package_name)
        if update is None:
            return None

        # avoid messages like "from version dev-master to dev-master"
        if update.from_pretty == update.to_pretty:
            return None

        notes: list[str] | None = None
        if update.is_upgrade and is_numeric_version(update.from_pretty):
            notes = find_upgrade_notes(
                self.storage,
                package_name,
                update.from_version,
                product_name=self.settings.product_name,
            )
            if notes is not None and not notes:
                # notes found, but none relevant to this upgrade
                return None

        lines = self.build_intro(package_name, update)
        if notes:
            if len(notes) > self.settings.max_note_lines:
                lines.append(NOTES_TOO_LONG_WARNING)
            else:
                lines.extend(_strip_blank_edges(notes))
        lines.append(ONLINE_NOTES_INTRO)
        lines.append(self.build_notes_url(package_name, update))
        return lines

    def build_intro(self, package_name: str, update: TrackedUpdate) -> list[str]:
        return [
            INTRO_TEMPLATE.format(
                action=UPGRADED_ACTION if update.is_upgrade else DOWNGRADED_ACTION,
                package_name=package_name,
                from_pretty=update.from_pretty,
                to_pretty=update.to_pretty,
            ),
            POLICY_NOTE,
        ]

    def build_notes_url(self, package_name: str, update: TrackedUpdate) -> str:
        """Link to the notes at the newer side of the transition.

        Branch aliases such as dev-master are replaced by the default branch so
        the link always points to an existing ref.
        """
        ref = update.to_pretty if update.is_upgrade else update.from_pretty
        if not is_numeric_version(ref):
            ref = self.settings.default_branch

        vendor, _, repo = package_name.rpartition("/")
        org = self.settings.github_org or vendor or repo
        return ONLINE_NOTES_URL_TEMPLATE.format(
            base_url=self.settings.github_base_url.rstrip("/"),
            org=org,
            repo=repo,
            ref=ref,
            filename=self.settings.notes_filename,
        )
