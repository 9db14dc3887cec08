"""Extraction of the upgrade notes relevant to a version range.

A notes document is a list of sections, newest first, each starting with a
header such as "Upgrade from Helper 2.0.1". A section lists what a consumer
still on that version has to change when upgrading. Scanning starts at the
first header and stops at the first section older than the version being
upgraded from.
"""

import re
from functools import lru_cache

from upgrade_notes.configs.app_configs import NOTES_PRODUCT_NAME
from upgrade_notes.notes.constants import SECTION_HEADER_TEMPLATE
from upgrade_notes.notes.constants import SECTION_HEADER_VERSION_PATTERN
from upgrade_notes.notes.exceptions import NotesUnavailableError
from upgrade_notes.notes.storage import NotesStorage
from upgrade_notes.utils.logger import setup_logger
from upgrade_notes.utils.version import extract_numeric_prefix
from upgrade_notes.utils.version import is_version_lt
from upgrade_notes.utils.version import is_version_lte

logger = setup_logger()


@lru_cache(maxsize=16)
def get_section_header_regex(product_name: str = NOTES_PRODUCT_NAME) -> re.Pattern:
    return re.compile(
        SECTION_HEADER_TEMPLATE.format(
            product=re.escape(product_name), version=SECTION_HEADER_VERSION_PATTERN
        ),
        re.IGNORECASE,
    )


def extract_relevant_lines(
    lines: list[str],
    from_version: str,
    product_name: str = NOTES_PRODUCT_NAME,
) -> list[str]:
    """Return the lines of every section still relevant when upgrading from `from_version`.

    The section for `from_version` itself is included. Scanning stops at the
    first header older than `from_version`, or at a second header for exactly
    `from_version`. Lines before the first header are never included.
    """
    header_regex = get_section_header_regex(product_name)
    from_version_major = extract_numeric_prefix(from_version)

    relevant_lines: list[str] = []
    consuming = False
    # whether a header for exactly from_version has been seen already
    found_exact_match = False
    for line in lines:
        match = header_regex.match(line)
        if match:
            section_version = match.group(1)
            if is_version_lte(section_version, from_version) and (
                found_exact_match or is_version_lt(section_version, from_version_major)
            ):
                break
            if section_version == from_version:
                found_exact_match = True
            consuming = True
        if consuming:
            relevant_lines.append(line)
    return relevant_lines


def find_upgrade_notes(
    storage: NotesStorage,
    package_name: str,
    from_version: str,
    product_name: str = NOTES_PRODUCT_NAME,
) -> list[str] | None:
    """Read the notes of a package and extract the relevant lines.

    Returns None when the document is unknown (missing or unreadable), and an
    empty list when the document exists but nothing in it is newer than
    `from_version`.
    """
    try:
        text = storage.read_notes(package_name)
    except NotesUnavailableError as e:
        logger.debug(f"No upgrade notes to extract: {e}")
        return None

    return extract_relevant_lines(text.splitlines(), from_version, product_name)
