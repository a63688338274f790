"""Tests for user settings defaults and updates."""

import pytest

from priceme.models import Attribution, UnitSystem, UserSettings
from priceme.services.exceptions import ValidationError
from priceme.services.settings_service import (
    default_settings,
    merge_settings,
    new_labor_line,
    price_with_tax,
)
from priceme.utils.constants import DEFAULT_IMPERIAL_UNITS, DEFAULT_METRIC_UNITS


class TestDefaultSettings:
    """Tests for default_settings function."""

    def test_metric_defaults(self):
        """Defaults are USD, no tax and metric units."""
        settings = default_settings()

        assert settings.currency == "USD"
        assert settings.tax_percentage == 0.0
        assert settings.revenue_goal is None
        assert settings.labor_hourly_cost is None
        assert settings.units == DEFAULT_METRIC_UNITS

    def test_imperial_defaults(self):
        """Imperial settings offer imperial units."""
        settings = default_settings("imperial")
        assert settings.unit_system == UnitSystem.IMPERIAL
        assert settings.units == DEFAULT_IMPERIAL_UNITS

    def test_units_are_a_copy(self):
        """Default unit lists are not shared with the constants."""
        assert default_settings().units is not DEFAULT_METRIC_UNITS


class TestMergeSettings:
    """Tests for merge_settings function."""

    def test_partial_update(self):
        """Only the given fields change."""
        settings = merge_settings(None, {"currency": "eur", "labor_hourly_cost": "18.5"})

        assert settings.currency == "EUR"
        assert settings.labor_hourly_cost == 18.5
        assert settings.tax_percentage == 0.0

    def test_clearing_optional_amount(self):
        """Optional amounts can be cleared with None."""
        current = UserSettings(revenue_goal=1000.0)
        assert merge_settings(current, {"revenue_goal": None}).revenue_goal is None

    def test_empty_units_fall_back_to_system_defaults(self):
        """An empty unit list restores the unit system's defaults."""
        settings = merge_settings(None, {"unit_system": "imperial", "units": []})
        assert settings.units == DEFAULT_IMPERIAL_UNITS

    def test_custom_units_stripped(self):
        """Custom unit names are kept, without surrounding spaces."""
        settings = merge_settings(None, {"units": [" g ", "drops"]})
        assert settings.units == ["g", "drops"]

    def test_collects_all_errors(self):
        """Every invalid field is reported."""
        with pytest.raises(ValidationError) as exc_info:
            merge_settings(
                None,
                {
                    "currency": "EURO",
                    "tax_percentage": 120,
                    "labor_hourly_cost": -1,
                    "unit_system": "nautical",
                    "units": ["g", ""],
                    "theme": "dark",
                },
            )

        errors = exc_info.value.errors
        assert len(errors) == 6
        assert errors[0] == "theme: Unknown setting"
        assert any(e.startswith("Currency") for e in errors)
        assert any(e.startswith("Tax percentage") for e in errors)
        assert any(e.startswith("Labor hourly cost") for e in errors)
        assert any(e.startswith("Unit system") for e in errors)
        assert any(e.startswith("Units") for e in errors)

    def test_original_unchanged(self):
        """merge_settings returns a new record."""
        current = default_settings()
        merge_settings(current, {"tax_percentage": 8})
        assert current.tax_percentage == 0.0


class TestNewLaborLine:
    """Tests for labor rate pre-fill."""

    def test_rate_from_settings(self):
        """The settings rate fills a missing hourly rate."""
        line = new_labor_line("Pouring", 30, settings=UserSettings(labor_hourly_cost=22.0))
        assert line.hourly_rate == 22.0
        assert line.attribution == Attribution.PER_UNIT

    def test_explicit_rate_wins(self):
        """An explicit rate overrides the settings rate."""
        line = new_labor_line(
            "Pouring", 30, settings=UserSettings(labor_hourly_cost=22.0), hourly_rate=15
        )
        assert line.hourly_rate == 15.0

    def test_no_rate_anywhere(self):
        """Without settings or rate the line costs nothing."""
        line = new_labor_line("Setup", "45", attribution="per_batch")
        assert line.hourly_rate == 0.0
        assert line.time_minutes == 45.0
        assert line.attribution == Attribution.PER_BATCH


class TestPriceWithTax:
    """Tests for price_with_tax function."""

    def test_adds_tax(self):
        """Tax is added on top of the price."""
        assert price_with_tax(15.0, UserSettings(tax_percentage=20)) == pytest.approx(18.0)

    def test_zero_tax(self):
        """No tax leaves the price unchanged."""
        assert price_with_tax(15.0, default_settings()) == 15.0
