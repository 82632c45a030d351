"""
Pytest configuration and shared fixtures for vcard_builder tests.

This module provides:
- Sample serialized vCards
- Pre-built cards for builder tests
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vcard_builder import VCard  # noqa: E402
from tests.fixtures.samples import (  # noqa: E402
    BASIC_VCARD,
    COMPLEX_VCARD,
    GAPPED_ITEMS_VCARD,
)


# ============================================================================
# Sample text fixtures
# ============================================================================


@pytest.fixture
def basic_vcard_text() -> str:
    """Return a minimal named card as text."""
    return BASIC_VCARD


@pytest.fixture
def complex_vcard_text() -> str:
    """Return a card with single properties and six item groups."""
    return COMPLEX_VCARD


@pytest.fixture
def gapped_vcard_text() -> str:
    """Return a card whose item groups are numbered 1 and 3."""
    return GAPPED_ITEMS_VCARD


# ============================================================================
# Card fixtures
# ============================================================================


@pytest.fixture
def empty_card() -> VCard:
    """Create a fresh card holding only BEGIN and VERSION."""
    return VCard()


@pytest.fixture
def contact_card() -> VCard:
    """Create a card with a name, organization and one phone."""
    from tests.fixtures.generators import create_contact_card
    return create_contact_card()


# ============================================================================
# Test configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "roundtrip: marks serialize/parse round-trip tests"
    )
