"""Energy calculation collection schemas."""

from typing import Optional

from pydantic import Field

from schemas.base import CamelModel, PartialUpdate
from schemas.enums import EnergyCalculationFormula, InjuryFactor, PhysicalActivityFactor


class EnergyCalculationEntry(CamelModel):
    """Energy calculation inputs recorded for a patient."""
    height: float = Field(..., ge=0, description="Height in cm")
    weight: float = Field(..., ge=0, description="Weight in kg")
    energy_calculation_formula: EnergyCalculationFormula = Field(..., description="Theoretical calculation formula")
    physical_activity_factor: Optional[PhysicalActivityFactor] = Field(None, description="Physical activity factor")
    injury_factor: Optional[InjuryFactor] = Field(None, description="Injury factor")
    pregnancy_energy_additional: Optional[float] = Field(None, ge=0, description="Pregnancy energy additional (kcal)")
    lean_body_mass: Optional[float] = Field(None, ge=0, description="Lean body mass in kg")

    model_config = {
        "json_schema_extra": {
            "example": {
                "height": 175,
                "weight": 80,
                "energyCalculationFormula": "harris-benedict-1984",
                "physicalActivityFactor": 1.2,
                "injuryFactor": 1.0,
                "pregnancyEnergyAdditional": 0,
            }
        }
    }


class EnergyCalculationUpdate(PartialUpdate):
    """Partial update of an energy calculation entry."""
    height: Optional[float] = Field(None, ge=0, description="Height in cm")
    weight: Optional[float] = Field(None, ge=0, description="Weight in kg")
    energy_calculation_formula: Optional[EnergyCalculationFormula] = Field(None, description="Theoretical calculation formula")
    physical_activity_factor: Optional[PhysicalActivityFactor] = Field(None, description="Physical activity factor")
    injury_factor: Optional[InjuryFactor] = Field(None, description="Injury factor")
    pregnancy_energy_additional: Optional[float] = Field(None, ge=0, description="Pregnancy energy additional (kcal)")
    lean_body_mass: Optional[float] = Field(None, ge=0, description="Lean body mass in kg")
