import os

from upgrade_notes.configs.constants import GITHUB_BASE_URL

#####
# Notes documents
#####
# File looked up inside each installed package directory
UPGRADE_NOTES_FILENAME = os.environ.get("UPGRADE_NOTES_FILENAME") or "UPGRADE.md"

# Product name used in the section headers, e.g. "Upgrade from Helper 2.0.1"
NOTES_PRODUCT_NAME = os.environ.get("NOTES_PRODUCT_NAME") or "Helper"

# Above this many relevant lines only a warning is printed
MAX_DISPLAYED_NOTE_LINES = int(os.environ.get("MAX_DISPLAYED_NOTE_LINES") or 250)

#####
# Online notes link
#####
NOTES_GITHUB_BASE_URL = (
    os.environ.get("NOTES_GITHUB_BASE_URL") or GITHUB_BASE_URL
).rstrip("/")
# If unset, the vendor part of the package name is used ("denisok94/helper" -> "denisok94")
NOTES_GITHUB_ORG = os.environ.get("NOTES_GITHUB_ORG") or None
# Used in the link when the version is a branch alias such as dev-master
DEFAULT_NOTES_BRANCH = os.environ.get("DEFAULT_NOTES_BRANCH") or "main"

#####
# Host integration
#####
VENDOR_DIR = (os.environ.get("VENDOR_DIR") or "vendor").rstrip("/")

_DEFAULT_TRACKED_PACKAGES = (
    "denisok94/helper,"
    "denisok94/yii-metatag,"
    "denisok94/yii-helper,"
    "denisok94/symfony-helper,"
    "denisok94/symfony-export-xlsx"
)
TRACKED_PACKAGES = [
    package_name.strip()
    for package_name in (
        os.environ.get("TRACKED_PACKAGES") or _DEFAULT_TRACKED_PACKAGES
    ).split(",")
    if package_name.strip()
]

#####
# Logging
#####
LOG_LEVEL = os.environ.get("LOG_LEVEL") or "info"
