#!/usr/bin/env python3
"""
vCard Parser

Turns serialized vCard text back into the ordered property mapping used
by VCard. Lines are expected to be unfolded and unescaped; no RFC
unfolding or unescaping is attempted.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from .config import ITEM_KEY_PATTERN

logger = logging.getLogger(__name__)


class VCardParser:
    """Parser for serialized vCard strings.

    Attributes:
        properties: Parsed key/value pairs in line order
        max_item_index: Highest ``item<N>.`` group number seen (0 if none)
    """

    def __init__(self):
        self.properties: Dict[str, str] = {}
        self.max_item_index = 0

    def parse(self, text: str) -> Dict[str, str]:
        """Parse vCard text into an ordered property mapping.

        A repeated key keeps its first position and takes the later value.
        Lines without a colon are dropped.

        Args:
            text: vCard data using \\n or \\r\\n line endings

        Returns:
            Dictionary mapping raw property keys to raw values
        """
        self.properties = {}
        self.max_item_index = 0

        lines = self._split_lines(text)
        dropped = 0

        for line in lines:
            parsed = self._parse_property(line)
            if parsed is None:
                dropped += 1
                logger.debug(f"Skipping line without colon: {line!r}")
                continue

            key, value = parsed
            index = self._item_index(key)
            if index is not None:
                self.max_item_index = max(self.max_item_index, index)

            self.properties[key] = value

        logger.debug(
            f"Parsed {len(self.properties)} properties from {len(lines)} lines "
            f"({dropped} dropped), highest item index {self.max_item_index}"
        )
        return self.properties

    def _split_lines(self, text: str) -> List[str]:
        """Split text on line endings and discard blank lines.

        Args:
            text: Raw vCard text

        Returns:
            Non-blank lines, untrimmed
        """
        return [line for line in re.split(r"\r?\n", text) if line.strip()]

    def _parse_property(self, line: str) -> Optional[Tuple[str, str]]:
        """Split a property line on its first colon.

        Args:
            line: A single vCard property line

        Returns:
            Tuple of (key, value), or None if the line has no colon
        """
        colon_idx = line.find(":")
        if colon_idx == -1:
            return None

        return (line[:colon_idx], line[colon_idx + 1 :])

    def _item_index(self, key: str) -> Optional[int]:
        match = ITEM_KEY_PATTERN.match(key)
        if match:
            return int(match.group(1))
        return None


def parse_vcard_string(text: str):
    """Convenience function to parse a vCard string into a VCard.

    Args:
        text: Serialized vCard data

    Returns:
        VCard instance populated with the parsed properties
    """
    from .vcard import VCard

    return VCard.from_string(text)
