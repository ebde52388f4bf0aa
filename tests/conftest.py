# tests/conftest.py
import pytest

from woodshop.core.item import Item


@pytest.fixture
def make_item():
    """Factory for items with sensible defaults."""

    def _make(species="Oak", thickness=25.0, moisture=12.0, treated=False, actions=()):
        return Item(species, thickness, moisture, treated, actions)

    return _make
