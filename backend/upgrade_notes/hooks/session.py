"""Glue between the host dependency manager and the notes reporter.

The host calls `on_package_operation` for every operation of an update pass
and `on_update_finished` once the pass is complete.
"""

from upgrade_notes.configs.constants import PackageOperationType
from upgrade_notes.configs.settings import UpgradeNotesSettings
from upgrade_notes.hooks.models import PackageOperation
from upgrade_notes.hooks.output import OutputSink
from upgrade_notes.notes.reporter import UpgradeNotesReporter
from upgrade_notes.notes.storage import FileSystemNotesStorage
from upgrade_notes.notes.storage import NotesStorage
from upgrade_notes.tracking.models import TrackedUpdate
from upgrade_notes.tracking.update_tracker import UpdateTracker
from upgrade_notes.utils.logger import setup_logger

logger = setup_logger()


class UpdateSession:
    def __init__(
        self,
        settings: UpgradeNotesSettings | None = None,
        storage: NotesStorage | None = None,
    ) -> None:
        self.settings = settings or UpgradeNotesSettings()
        self.storage = storage or FileSystemNotesStorage(
            self.settings.vendor_dir, self.settings.notes_filename
        )
        self.tracker = UpdateTracker()
        self.reporter = UpgradeNotesReporter(self.tracker, self.storage, self.settings)

    def on_package_operation(self, operation: PackageOperation) -> TrackedUpdate | None:
        """Take note of package updates, other operations are ignored."""
        if operation.operation_type != PackageOperationType.UPDATE:
            logger.debug(
                f"Ignoring {operation.operation_type.value} of {operation.package_name}"
            )
            return None

        if operation.initial is None or operation.target is None:
            logger.warning(
                f"Update of {operation.package_name} is missing a version, skipping"
            )
            return None

        return self.tracker.record(
            operation.package_name,
            from_version=operation.initial.version,
            from_pretty=operation.initial.pretty_version,
            to_version=operation.target.version,
            to_pretty=operation.target.pretty_version,
        )

    def on_update_finished(self, sink: OutputSink) -> dict[str, list[str]]:
        """Report every configured package that was updated, in configured order.

        A failure for one package is logged and does not stop the others.
        Returns the reports that were written, keyed by package name.
        """
        written: dict[str, list[str]] = {}
        for package_name in self.settings.tracked_packages:
            if package_name not in self.tracker:
                continue

            package_logger = setup_logger(extra={"package_name": package_name})
            try:
                lines = self.reporter.report(package_name)
                if lines is None:
                    package_logger.debug("Nothing to report")
                    continue
                sink.write(lines)
                written[package_name] = lines
            except Exception:
                package_logger.exception("Failed to show upgrade notes")
        return written
