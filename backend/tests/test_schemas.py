"""
Tests for the pydantic models and their v1-style configuration
"""

import pytest
from pydantic import ValidationError

from models.enums import HeatingFuel
from models.schemas import CompareFields, EfficiencyResult, ProjectFileResult


class TestSchemas:

    def test_project_result_is_frozen(self):
        result = ProjectFileResult(area="1200 SqFt")
        with pytest.raises(ValidationError):
            result.area = "0 SqFt"

    def test_building_type_normalized(self):
        fields = CompareFields(zip_code=33101, area=42000, number_floors=4, building_type=" office ",
                               hvac_heating_type="ELECTRIC", cooling_sqft_per_ton=350,
                               heating_btu_per_sqft=30)
        assert fields.building_type == "OFFICE"
        assert fields.hvac_heating_type == HeatingFuel.electric

    def test_dict_export(self):
        """Test .dict() keeps enum members usable as JSON strings"""
        data = EfficiencyResult(tech_type="DX", capacity="60 kBTUh", value="0.2857", metric="EIR").dict()
        assert data["metric"] == "EIR"
        assert data["chiller_count"] == 0
