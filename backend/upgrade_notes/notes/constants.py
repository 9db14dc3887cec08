"""Constants for upgrade notes display."""

from upgrade_notes.configs.constants import NUMERIC_VERSION_PATTERN

# "Upgrade from <Product> <version>", the product name is filled in at runtime
SECTION_HEADER_TEMPLATE = r"^Upgrade from {product} ({version})"
SECTION_HEADER_VERSION_PATTERN = NUMERIC_VERSION_PATTERN.lstrip("^")

INTRO_TEMPLATE = (
    "Seems you have {action} {package_name} from version {from_pretty} to {to_pretty}."
)
UPGRADED_ACTION = "upgraded"
DOWNGRADED_ACTION = "downgraded"
POLICY_NOTE = (
    "Please check the upgrade notes for possible incompatible changes "
    "and adjust your application code accordingly."
)
NOTES_TOO_LONG_WARNING = (
    "The relevant notes for your upgrade are too long to be displayed here."
)
ONLINE_NOTES_INTRO = "You can find the upgrade notes for all versions online at:"
ONLINE_NOTES_URL_TEMPLATE = "{base_url}/{org}/{repo}/blob/{ref}/{filename}"
