"""
vCard 3.0 builder and parser.

Build contact cards with a chainable API, serialize them to text, and
parse serialized cards back for further editing.
"""

from .vcard import VCard
from .parser import VCardParser, parse_vcard_string
from .logging_config import setup_logging, get_logger

__version__ = "1.0.0"
__all__ = [
    "VCard",
    "VCardParser",
    "parse_vcard_string",
    "setup_logging",
    "get_logger",
]
