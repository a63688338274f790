"""Tests for product lifecycle transitions."""

import logging

import pytest

from priceme.models import Product, ProductStatus
from priceme.services.exceptions import InvalidStatusTransition, ValidationError
from priceme.services.product_status_service import (
    can_transition,
    filter_by_status,
    on_sale_products,
    transition_status,
)


class TestCanTransition:
    """Tests for can_transition function."""

    @pytest.mark.parametrize(
        "current,target",
        [
            ("draft", "in_progress"),
            ("in_progress", "on_sale"),
            ("on_sale", "in_progress"),
            ("draft", "inactive"),
            ("on_sale", "inactive"),
            ("inactive", "draft"),
        ],
    )
    def test_allowed(self, current, target):
        """Allowed moves."""
        assert can_transition(current, target) is True

    @pytest.mark.parametrize(
        "current,target",
        [
            ("draft", "on_sale"),
            ("inactive", "on_sale"),
            ("inactive", "in_progress"),
            ("on_sale", "draft"),
        ],
    )
    def test_rejected(self, current, target):
        """Moves that skip a stage are not allowed."""
        assert can_transition(current, target) is False

    def test_same_status_allowed(self):
        """Staying in place is always allowed."""
        for status in ProductStatus:
            assert can_transition(status, status) is True


class TestTransitionStatus:
    """Tests for transition_status function."""

    def test_moves_product(self, candle):
        """A valid move returns a copy with the new status."""
        moved = transition_status(candle, ProductStatus.ON_SALE)

        assert moved.status == ProductStatus.ON_SALE
        assert candle.status == ProductStatus.IN_PROGRESS

    def test_same_status_returns_same_product(self, candle):
        """No-op moves return the product unchanged."""
        assert transition_status(candle, "in_progress") is candle

    def test_invalid_move_raises(self, caplog):
        """An invalid move raises and logs a warning."""
        product = Product(name="Draft soap", id=4)

        with caplog.at_level(logging.WARNING, logger="priceme.services"):
            with pytest.raises(InvalidStatusTransition) as exc_info:
                transition_status(product, "on_sale")

        assert exc_info.value.current == "draft"
        assert exc_info.value.target == "on_sale"
        assert "transition_status: rejected" in caplog.text

    def test_unknown_status_raises_validation_error(self, candle):
        """Unknown status names raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            transition_status(candle, "archived")
        assert exc_info.value.errors[0].startswith("Status: Invalid choice")

    def test_unknown_status_in_filter(self, candle):
        """Filtering by an unknown status raises ValidationError."""
        with pytest.raises(ValidationError):
            filter_by_status([candle], "archived")


class TestFilters:
    """Tests for status filters."""

    def test_filter_by_status(self, candle):
        """Only products in the status are returned, in order."""
        draft = Product(name="Draft", id=2)
        selling = Product(name="Selling", id=3, status=ProductStatus.ON_SALE)
        products = [candle, draft, selling]

        assert filter_by_status(products, "draft") == [draft]
        assert on_sale_products(products) == [selling]
