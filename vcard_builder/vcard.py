#!/usr/bin/env python3
"""
vCard Builder

Builds vCard 3.0 contact records with a chainable API and rebuilds them
from previously serialized text so they can be edited and written again.

Every property lives in one insertion-ordered mapping from raw key
(parameters included, e.g. ``item2.TEL;PREF=1;TYPE=cell``) to raw value.
Repeatable details are stored as numbered item groups: an
``item<N>.X-ABLABEL`` label line followed by one value line.

Values are written verbatim. No folding or escaping is performed, so a
value containing a raw newline will not survive a round trip.
"""

import logging
from typing import Dict, Optional, Sequence, Union

from . import config
from .parser import VCardParser

logger = logging.getLogger(__name__)


class VCard:
    """Ordered vCard property store with a fluent builder interface.

    Setters and adders return the instance so calls can be chained.
    Absent values (None or empty string) make a call a no-op.

    Attributes:
        item_index: Number the next item group will use
    """

    def __init__(self):
        """Create a card seeded with BEGIN and VERSION."""
        self._properties: Dict[str, str] = {
            "BEGIN": config.VCARD_BEGIN_VALUE,
            "VERSION": config.VCARD_VERSION,
        }
        self._item_index = 1

    @classmethod
    def from_string(cls, text: str) -> "VCard":
        """Create a VCard from a serialized vCard string.

        The default BEGIN/VERSION seed is discarded and replaced by exactly
        the parsed properties, in line order. Item groups added afterwards
        continue after the highest parsed ``item<N>`` number.

        Args:
            text: vCard data as a string

        Returns:
            A new VCard populated with the parsed data
        """
        parser = VCardParser()
        properties = parser.parse(text)

        vcard = cls()
        vcard._properties = dict(properties)
        vcard._item_index = parser.max_item_index + 1
        return vcard

    @property
    def properties(self) -> Dict[str, str]:
        """Copy of the current key/value mapping, in serialization order."""
        return dict(self._properties)

    @property
    def item_index(self) -> int:
        return self._item_index

    # ------------------------------------------------------------------ #
    # single properties
    # ------------------------------------------------------------------ #

    def set_name(
        self, first_name: Optional[str] = None, last_name: Optional[str] = None
    ) -> "VCard":
        """Set FN and N from a first and last name.

        FN is "first last", or whichever name is present. N is written as
        "last;first;;;" with middle name, prefix and suffix left empty.

        Args:
            first_name: Given name
            last_name: Family name

        Returns:
            self
        """
        if not first_name and not last_name:
            logger.debug("set_name called without a name, ignoring")
            return self

        if first_name and last_name:
            full_name = f"{first_name} {last_name}"
        else:
            full_name = first_name or last_name or ""

        self._properties[config.FULL_NAME_KEY] = full_name
        self._properties[config.NAME_KEY] = f"{last_name or ''};{first_name or ''};;;"
        return self

    def set_organization(self, organization: Optional[str]) -> "VCard":
        return self._set_single(config.ORGANIZATION_KEY, organization)

    def set_note(self, note: Optional[str]) -> "VCard":
        return self._set_single(config.NOTE_KEY, note)

    def set_job_title(self, job_title: Optional[str]) -> "VCard":
        return self._set_single(config.JOB_TITLE_KEY, job_title)

    def set_photo(
        self, base64_data: str, image_type: str = config.DEFAULT_PHOTO_TYPE
    ) -> "VCard":
        """Set a base64 encoded photo.

        A leading ``data:image/(jpeg|png|gif);base64,`` prefix is stripped.
        The image type is part of the key, so photos of different types are
        stored side by side rather than replacing each other.

        Args:
            base64_data: Base64 payload, optionally as a data URL
            image_type: TYPE parameter, e.g. "JPEG" or "PNG"

        Returns:
            self
        """
        clean_data = config.PHOTO_DATA_URL_PATTERN.sub("", base64_data, count=1)
        key = config.PHOTO_KEY_TEMPLATE.format(image_type=image_type)
        self._properties[key] = clean_data
        return self

    # ------------------------------------------------------------------ #
    # item groups
    # ------------------------------------------------------------------ #

    def add_phone(self, label: str, value: Optional[str], type: str = "cell") -> "VCard":
        """Add a labelled phone number as a new item group.

        Args:
            label: Display label, e.g. "Mobile"
            value: Phone number; None or empty makes this a no-op
            type: One of work, home, cell, voice, fax, pager

        Returns:
            self
        """
        if not value:
            return self
        self._check_type("phone", type, config.PHONE_TYPES)
        return self._add_item(label, config.PHONE_KEY_TEMPLATE.format(type=type), value)

    def add_email(self, label: str, value: Optional[str], type: str = "home") -> "VCard":
        """Add a labelled email address as a new item group."""
        if not value:
            return self
        self._check_type("email", type, config.EMAIL_TYPES)
        return self._add_item(label, config.EMAIL_KEY_TEMPLATE.format(type=type), value)

    def add_url(self, label: str, value: Optional[str], type: str = "home") -> "VCard":
        """Add a labelled URL as a new item group.

        The type is written as a bare parameter (``URL;home``), not as
        ``TYPE=home``.
        """
        if not value:
            return self
        self._check_type("url", type, config.URL_TYPES)
        return self._add_item(label, config.URL_KEY_TEMPLATE.format(type=type), value)

    def add_text(self, label: str, value: Optional[str]) -> "VCard":
        """Add a labelled free-text value.

        Stored under an untyped ``URL`` key, which is how address book
        applications display arbitrary labelled fields.
        """
        if not value:
            return self
        return self._add_item(label, config.TEXT_KEY, value)

    def add_address(
        self,
        label: str,
        full_street: Optional[str] = None,
        city: Optional[str] = None,
        region: Optional[str] = None,
        postal_code: Optional[Union[str, int]] = None,
        country: Optional[str] = None,
    ) -> "VCard":
        """Add a labelled postal address as a new item group.

        Only the parts that are present are joined with ";", so the number
        of components varies with the input. For example an address with
        only a city is written as ``ADR;CHARSET=UTF-8:NYC``.

        Args:
            label: Display label, e.g. "Home"
            full_street: Street line
            city: City or locality
            region: State or region
            postal_code: Postal code, as text or a number
            country: Country name

        Returns:
            self
        """
        value = self._join_present([full_street, city, region, postal_code, country])
        if not value:
            return self
        return self._add_item(label, config.ADDRESS_KEY, value)

    # ------------------------------------------------------------------ #
    # serialization
    # ------------------------------------------------------------------ #

    def to_string(self) -> str:
        """Serialize the card.

        Writes END:VCARD into the mapping first (overwriting any previous
        END), then renders every property as ``key:value`` joined by "\\n"
        without a trailing newline.

        Returns:
            The complete vCard data as a string
        """
        self._properties["END"] = config.VCARD_BEGIN_VALUE
        return config.LINE_SEPARATOR.join(
            f"{key}:{value}" for key, value in self._properties.items()
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        name = self._properties.get(config.FULL_NAME_KEY, "")
        return (
            f"VCard({name!r}, properties={len(self._properties)}, "
            f"item_index={self._item_index})"
        )

    # ------------------------------------------------------------------ #
    # internal helpers
    # ------------------------------------------------------------------ #

    def _set_single(self, key: str, value: Optional[str]) -> "VCard":
        if not value:
            logger.debug(f"No value for {key}, ignoring")
            return self
        self._properties[key] = value
        return self

    def _add_item(self, label: str, suffix: str, value: str) -> "VCard":
        """Write a label/value pair under the next item group number."""
        index = self._item_index
        self._properties[config.item_key(index, config.ITEM_LABEL_SUFFIX)] = label
        self._properties[config.item_key(index, suffix)] = value
        self._item_index += 1
        return self

    def _check_type(self, kind: str, value: str, known: Sequence[str]) -> None:
        if value not in known:
            logger.warning(
                f"Unknown {kind} type {value!r} (expected one of {', '.join(known)}), "
                "writing it as given"
            )

    @staticmethod
    def _join_present(parts: Sequence[Optional[Union[str, int]]]) -> str:
        return ";".join(str(part) for part in parts if part)
