"""Fixtures for upgrade notes unit tests."""

import pytest

from upgrade_notes.configs.settings import UpgradeNotesSettings
from upgrade_notes.notes.storage import InMemoryNotesStorage
from upgrade_notes.tracking.update_tracker import UpdateTracker

HELPER_PACKAGE = "denisok94/helper"

HELPER_NOTES = """Upgrading Instructions for Helper
=================================

This file contains the upgrade notes. Read them carefully.

Upgrade from Helper 3.0
-----------------------

* `Helper::slug()` now requires a locale.

Upgrade from Helper 2.5
-----------------------

* `ArrayHelper` was moved to its own namespace.

Upgrade from Helper 2.0
-----------------------

* Minimum PHP version raised.
"""


@pytest.fixture
def settings() -> UpgradeNotesSettings:
    return UpgradeNotesSettings(
        tracked_packages=[HELPER_PACKAGE, "denisok94/yii-helper"],
        vendor_dir="vendor",
        product_name="Helper",
        max_note_lines=250,
        github_base_url="https://github.com",
        github_org="Denisok94",
        default_branch="main",
    )


@pytest.fixture
def tracker() -> UpdateTracker:
    return UpdateTracker()


@pytest.fixture
def storage() -> InMemoryNotesStorage:
    return InMemoryNotesStorage({HELPER_PACKAGE: HELPER_NOTES})
