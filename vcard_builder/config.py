#!/usr/bin/env python3
"""
vCard Format Configuration Module

Centralized constants for the vCard 3.0 subset produced and consumed by
this package, including seed properties, key templates for item groups
and the known type vocabularies.
"""

import re


# =============================================================================
# Seed and framing properties
# =============================================================================

VCARD_BEGIN_VALUE = "VCARD"
"""Value of both the BEGIN and END properties."""

VCARD_VERSION = "3.0"

LINE_SEPARATOR = "\n"
"""Separator used when serializing. Parsing also accepts \\r\\n."""

# =============================================================================
# Single property keys
# =============================================================================

FULL_NAME_KEY = "FN"
NAME_KEY = "N"
ORGANIZATION_KEY = "ORG"
JOB_TITLE_KEY = "TITLE"
NOTE_KEY = "NOTE"

DEFAULT_PHOTO_TYPE = "JPEG"
PHOTO_KEY_TEMPLATE = "PHOTO;ENCODING=BASE64;TYPE={image_type}"

# Only these three subtypes are stripped, and only when lowercase
PHOTO_DATA_URL_PATTERN = re.compile(r"^data:image/(jpeg|png|gif);base64,")

# =============================================================================
# Item group keys
# =============================================================================

ITEM_LABEL_SUFFIX = "X-ABLABEL"
PHONE_KEY_TEMPLATE = "TEL;PREF=1;TYPE={type}"
EMAIL_KEY_TEMPLATE = "EMAIL;CHARSET=UTF-8;TYPE={type}"
URL_KEY_TEMPLATE = "URL;{type}"
TEXT_KEY = "URL"
ADDRESS_KEY = "ADR;CHARSET=UTF-8"

ITEM_KEY_PATTERN = re.compile(r"^item(\d+)\.")
"""Matches the item group prefix of a parsed key, e.g. ``item12.TEL``."""

# Known type parameters. Anything else is still written, with a warning.
PHONE_TYPES = ("work", "home", "cell", "voice", "fax", "pager")
EMAIL_TYPES = ("work", "home")
URL_TYPES = ("work", "home")


def item_key(index: int, suffix: str) -> str:
    """Build the key for one line of an item group

    Args:
        index: Item group number
        suffix: Property part after the group prefix

    Returns:
        Key string

    Examples:
        >>> item_key(3, "X-ABLABEL")
        'item3.X-ABLABEL'
        >>> item_key(1, PHONE_KEY_TEMPLATE.format(type="cell"))
        'item1.TEL;PREF=1;TYPE=cell'
    """
    return f"item{index}.{suffix}"
