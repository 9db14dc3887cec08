"""Custom exception classes for upgrade notes."""


class UpgradeNotesError(Exception):
    """Base exception for upgrade notes errors."""


class NotesUnavailableError(UpgradeNotesError):
    """The notes document of a package is missing or cannot be read."""

    def __init__(self, package_name: str, location: str | None = None):
        message = f"Upgrade notes for {package_name} are not available"
        if location:
            message += f" at {location}"
        super().__init__(message)
        self.package_name = package_name
        self.location = location
