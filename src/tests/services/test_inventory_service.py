"""Tests for the materials library inventory service."""

import logging
from datetime import date

import pytest

from priceme.models import (
    Attribution,
    ExactQuantity,
    LibraryMaterial,
    MaterialLine,
    PercentageOfStock,
    Product,
    StockStatus,
)
from priceme.services.exceptions import MaterialNotFound, ValidationError
from priceme.services.inventory_service import (
    add_stock,
    check_stock_for_batch,
    get_library_material,
    is_low_stock,
    link_stock_levels,
    low_stock_materials,
    required_quantity_for_batch,
    stock_status,
)
from priceme.services.product_pricing_service import calculate_product_pricing


def _material(stock_level, reorder_point, **kwargs):
    return LibraryMaterial(
        name="Wax", unit="g", stock_level=stock_level, reorder_point=reorder_point, **kwargs
    )


class TestStockStatus:
    """Tests for stock health classification."""

    def test_at_reorder_point_is_critical(self):
        """Stock at the reorder point is critical."""
        assert stock_status(_material(100, 100)) == StockStatus.CRITICAL
        assert is_low_stock(_material(100, 100)) is True

    def test_below_double_reorder_point_is_warning(self):
        """Stock under twice the reorder point is a warning."""
        assert stock_status(_material(150, 100)) == StockStatus.WARNING

    def test_well_stocked_is_ok(self):
        """Stock at twice the reorder point or more is ok."""
        assert stock_status(_material(200, 100)) == StockStatus.OK

    def test_no_reorder_point(self):
        """Without a reorder point, any positive stock is ok."""
        assert stock_status(_material(5, 0)) == StockStatus.OK
        assert stock_status(_material(0, 0)) == StockStatus.CRITICAL

    def test_explicit_ratio(self):
        """The warning ratio can be passed in."""
        assert stock_status(_material(250, 100), warning_ratio=3) == StockStatus.WARNING

    def test_ratio_from_environment(self, monkeypatch):
        """The default ratio comes from configuration."""
        monkeypatch.setenv("PRICEME_STOCK_WARNING_RATIO", "3")
        assert stock_status(_material(250, 100)) == StockStatus.WARNING

    def test_low_stock_materials(self):
        """Only materials at or below reorder point are listed."""
        low = _material(10, 20)
        fine = _material(50, 20)
        assert low_stock_materials([fine, low]) == [low]


class TestAddStock:
    """Tests for add_stock function."""

    def test_add_with_new_price(self):
        """Stock, quantity and investment grow; the new price is recorded."""
        material = _material(100, 10, quantity=100, price=5.0, price_per_unit=0.05, id=1)
        updated = add_stock(material, 200, price_per_unit=0.04, purchased_on=date(2024, 3, 1))

        assert updated.stock_level == 300
        assert updated.quantity == 300
        assert updated.price == pytest.approx(13.0)
        assert updated.price_per_unit == 0.04
        assert updated.last_purchased_date == date(2024, 3, 1)
        assert updated.last_purchased_price == 0.04
        assert updated.last_purchased_quantity == 200
        assert material.stock_level == 100

    def test_add_without_price_uses_current(self):
        """Without a price the current price per unit is used."""
        material = _material(0, 10, price_per_unit=0.05)
        updated = add_stock(material, 100)

        assert updated.price == pytest.approx(5.0)
        assert updated.price_per_unit == 0.05
        assert updated.last_purchased_date == date.today()

    @pytest.mark.parametrize("quantity", [0, -5, "abc", None])
    def test_non_positive_quantity_rejected(self, quantity):
        """Quantity must be greater than zero."""
        with pytest.raises(ValidationError) as exc_info:
            add_stock(_material(0, 0), quantity)
        assert "Quantity" in exc_info.value.errors[0]


class TestLibraryLinking:
    """Tests for library lookups and stock linking."""

    def test_get_library_material(self, fragrance_library):
        """Materials are found by ID."""
        assert get_library_material([fragrance_library], 7) is fragrance_library

    def test_get_missing_material_raises(self, fragrance_library):
        """Unknown IDs raise MaterialNotFound."""
        with pytest.raises(MaterialNotFound) as exc_info:
            get_library_material([fragrance_library], 99)
        assert exc_info.value.material_id == 99

    def test_link_copies_stock_level(self, fragrance_line, fragrance_library, wax_line):
        """Linked percentage lines receive the library stock level."""
        linked = link_stock_levels([fragrance_line, wax_line], [fragrance_library])

        assert linked[0].quantity_mode.stock_level == 500
        assert linked[1] is wax_line
        assert fragrance_line.quantity_mode.stock_level is None

    def test_linked_line_is_costed(self, fragrance_line, fragrance_library):
        """Once linked, a percentage line contributes its cost."""
        product = Product(name="Candle", batch_size=10, materials=[fragrance_line])
        assert calculate_product_pricing(product).product_cost == 0.0

        linked = Product(
            name="Candle",
            batch_size=10,
            materials=link_stock_levels(product.materials, [fragrance_library]),
        )
        # 10% of 500 ml at 0.30 over 10 units
        assert calculate_product_pricing(linked).product_cost == pytest.approx(1.5)


class TestBatchStockCheck:
    """Tests for check_stock_for_batch function."""

    def test_required_quantity_exact(self):
        """Exact lines need quantity x batch / units produced."""
        line = MaterialLine("Wax", "g", 0.05, ExactQuantity(100, 10))
        assert required_quantity_for_batch(line, 5) == pytest.approx(50.0)

    def test_required_quantity_percentage(self):
        """Percentage lines need their share once per batch or per unit."""
        per_batch = MaterialLine(
            "Oil", "ml", 0.3, PercentageOfStock(10, 500), attribution=Attribution.PER_BATCH
        )
        per_unit = MaterialLine("Oil", "ml", 0.3, PercentageOfStock(10, 500))

        assert required_quantity_for_batch(per_batch, 4) == pytest.approx(50.0)
        assert required_quantity_for_batch(per_unit, 4) == pytest.approx(200.0)

    def test_enough_stock(self, fragrance_line, fragrance_library):
        """No issues when the library covers the batch."""
        product = Product(name="Candle", batch_size=10, materials=[fragrance_line])
        assert check_stock_for_batch(product, [fragrance_library]) == []

    def test_shortfall_reported(self, caplog):
        """Short materials are listed with their shortfall."""
        library = [LibraryMaterial(id=3, name="Wax", unit="g", stock_level=300)]
        line = MaterialLine(
            "Wax", "g", 0.05, ExactQuantity(100, 1), library_material_id=3
        )
        product = Product(name="Candle", batch_size=5, materials=[line], id=9)

        with caplog.at_level(logging.WARNING, logger="priceme.services"):
            issues = check_stock_for_batch(product, library)

        assert len(issues) == 1
        assert issues[0].material == "Wax"
        assert issues[0].required == pytest.approx(500.0)
        assert issues[0].shortfall == pytest.approx(200.0)
        assert issues[0].unit == "g"
        assert "insufficient_stock" in caplog.text

    def test_unlinked_lines_skipped(self, wax_line):
        """Lines not linked to the library are not checked."""
        product = Product(name="Candle", batch_size=100, materials=[wax_line])
        assert check_stock_for_batch(product, []) == []

    def test_missing_library_material_has_no_stock(self):
        """A line linked to a deleted material is reported as short."""
        line = MaterialLine("Wick", "pcs", 0.1, ExactQuantity(1), library_material_id=42)
        product = Product(name="Candle", batch_size=2, materials=[line])

        issues = check_stock_for_batch(product, [])
        assert issues[0].current_stock == 0.0
        assert issues[0].required == pytest.approx(2.0)
