"""
Tests for baseline cooling and heating efficiency calculations
"""

import logging

import pytest

from data.efficiency_tables import DEFAULT_EFFICIENCY_TABLES, EfficiencyTables
from domain.calculations.efficiency import (
    DX_TIERS_BTUH, get_cool_eff, get_heat_eff, kbtuh_label, size_chiller_plant, tier_value
)
from models.enums import EfficiencyMetric


class TestTierValue:
    """Test capacity tier selection"""

    VALUES = ("a", "b", "c", "d", "e")

    @pytest.mark.parametrize("btuh,expected", [
        (0, "a"),
        (64999, "a"),
        (65000, "b"),
        (134999, "b"),
        (135000, "c"),
        (240000, "d"),
        (760000, "e"),
        (5000000, "e"),
    ])
    def test_boundaries_belong_to_upper_tier(self, btuh, expected):
        assert tier_value(self.VALUES, DX_TIERS_BTUH, btuh) == expected

    def test_short_table_caps_at_last_value(self):
        """Test a table with fewer values than tiers"""
        assert tier_value(("a", "b"), DX_TIERS_BTUH, 1000000) == "b"

    def test_kbtuh_label_floors(self):
        assert kbtuh_label(60000) == "60 kBTUh"
        assert kbtuh_label(12999) == "12 kBTUh"


class TestChillerPlantSizing:

    @pytest.mark.parametrize("tons,count,per_chiller,description", [
        (100, 1, 100, "Water cooled screw/scroll"),
        (299, 1, 299, "Water cooled screw/scroll"),
        (300, 2, 150, "Water cooled screw/scroll"),
        (599, 2, 300, "Water cooled screw/scroll"),
        (600, 2, 300, "Centrifugal"),
        (1600, 2, 800, "Centrifugal"),
        (1601, 3, 534, "Centrifugal"),
    ])
    def test_plant_split(self, tons, count, per_chiller, description):
        plant = size_chiller_plant(tons)
        assert plant.chiller_count == count
        assert plant.tons_per_chiller == per_chiller
        assert plant.description == description


class TestCoolingEfficiency:
    """Test get_cool_eff across the baseline systems"""

    def test_packaged_ac_small(self):
        """Test 5 tons falls in the first DX tier"""
        result = get_cool_eff(2000, 3, 400)
        assert result.tech_type == "DX"
        assert result.description == "Air Conditioners"
        assert result.capacity == "60 kBTUh"
        assert result.value == "0.2857"
        assert result.metric == EfficiencyMetric.eir

    def test_packaged_ac_second_tier(self):
        """Test 6 tons (72 kBTUh) moves to the next tier"""
        result = get_cool_eff(2400, 3, 400)
        assert result.capacity == "72 kBTUh"
        assert result.value == "0.3050"

    def test_tons_round_up(self):
        """Test partial tons count as a whole ton"""
        assert get_cool_eff(2001, 5, 400).capacity == "72 kBTUh"

    def test_heat_pump_caps_at_last_tier(self):
        result = get_cool_eff(400000, 4, 400)
        assert result.value == DEFAULT_EFFICIENCY_TABLES.dx_cooling_eir[4][-1]

    def test_packaged_terminal_curve(self):
        """Test the PTAC/PTHP capacity curve for one ton"""
        result = get_cool_eff(400, 1, 400)
        assert result.description == "New construction"
        assert result.capacity == "12 kBTUh"
        assert result.value == "0.29"

    def test_single_chiller(self):
        result = get_cool_eff(40000, 7, 400)
        assert result.tech_type == "Chiller"
        assert result.chiller_count == 1
        assert result.capacity == "100 Tons"
        assert result.value == "0.2246"

    def test_paired_chillers(self):
        """Test 300 tons split into two 150 ton machines"""
        result = get_cool_eff(120000, 8, 400)
        assert result.chiller_count == 2
        assert result.capacity == "150 Tons"
        assert result.value == "0.2042"

    def test_centrifugal_plant(self):
        result = get_cool_eff(640400, 7, 400)
        assert result.description == "Centrifugal"
        assert result.chiller_count == 3
        assert result.capacity == "534 Tons"
        assert result.value == "0.1638"

    def test_summary_text(self):
        assert get_cool_eff(2000, 3, 400).summary() == "DX, Air Conditioners: 60 kBTUh, 0.2857 EIR"

    def test_unknown_system_returns_empty(self, caplog):
        """Test an unsupported id is logged, not raised"""
        with caplog.at_level(logging.WARNING):
            result = get_cool_eff(2000, 9, 400)
        assert result.is_empty
        assert result.value == ""
        assert "Unsupported HVAC system 9" in caplog.text

    @pytest.mark.parametrize("rate", [0, -400])
    def test_non_positive_rate_rejected(self, rate):
        with pytest.raises(ValueError):
            get_cool_eff(2000, 3, rate)

    def test_injected_tables(self):
        """Test callers can supply their own efficiency tables"""
        tables = EfficiencyTables(dx_cooling_eir={3: ("x1", "x2", "x3", "x4", "x5")})
        assert get_cool_eff(2000, 3, 400, tables).value == "x1"
        assert get_cool_eff(2000, 7, 400, tables).is_empty


class TestHeatingEfficiency:
    """Test get_heat_eff across the baseline systems"""

    @pytest.mark.parametrize("hvac_id", [1, 5, 7])
    def test_boiler_systems(self, hvac_id):
        result = get_heat_eff(10000, hvac_id, 30)
        assert result.tech_type == "HW Boiler"
        assert result.capacity == "300 kBTUh"
        assert result.value == "0.8"
        assert result.metric == EfficiencyMetric.afue

    def test_pthp(self):
        result = get_heat_eff(400, 2, 30)
        assert result.description == "PTHP"
        assert result.capacity == "12 kBTUh"
        assert result.value == "0.35"

    @pytest.mark.parametrize("btuh,expected", [(224999, "0.78"), (225000, "0.8")])
    def test_furnace_threshold(self, btuh, expected):
        result = get_heat_eff(btuh, 3, 1)
        assert result.tech_type == "Furnace"
        assert result.value == expected

    @pytest.mark.parametrize("area,expected", [(2000, "0.44"), (2166.67, "0.31"), (4500, "0.32")])
    def test_heat_pump_tiers(self, area, expected):
        assert get_heat_eff(area, 4, 30).value == expected

    @pytest.mark.parametrize("hvac_id", [6, 8])
    def test_electric_resistance_has_no_rating(self, hvac_id):
        result = get_heat_eff(2000, hvac_id, 30)
        assert result.tech_type == "Elec Res"
        assert result.value == ""
        assert result.summary() == "Elec Res: 60 kBTUh"

    def test_unknown_system_returns_empty(self):
        assert get_heat_eff(2000, 0, 30).is_empty

    def test_results_are_pure(self):
        """Test repeated calls give equal results"""
        assert get_heat_eff(5000, 3, 30) == get_heat_eff(5000, 3, 30)
