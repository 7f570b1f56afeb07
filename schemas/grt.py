"""
Pydantic schemas for records in GRT JSON exports

One model per export file. Field names are the catalog's; aliases are
the export's field names (``BC_G1``, ``Weight``, ...).
"""

from pydantic import BaseModel, Field, validator
from typing import Optional


class GRTRecord(BaseModel):
    """
    Fields shared by every GRT record.

    ``Id`` is the record's identifier inside GRT. It ends up as the
    provenance source id (and as SKU / lot number for some types).
    """

    source_id: str = Field(..., min_length=1, alias="Id")

    @validator("source_id", pre=True)
    def coerce_source_id(cls, v):
        """GRT writes some ids as numbers"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    class Config:
        populate_by_name = True
        extra = "ignore"


class GRTProjectileRecord(GRTRecord):
    manufacturer: str = Field(..., min_length=1, alias="Manufacturer")
    name: str = Field(..., min_length=1, alias="Name")
    caliber: Optional[str] = Field(None, alias="Caliber")
    diameter: float = Field(0, alias="Diameter")
    weight: float = Field(0, alias="Weight")
    type: Optional[str] = Field(None, alias="Type")
    bc_g1: Optional[float] = Field(None, alias="BC_G1")
    bc_g7: Optional[float] = Field(None, alias="BC_G7")
    sd: Optional[float] = Field(None, alias="SD")


class GRTCartridgeRecord(GRTRecord):
    name: str = Field(..., min_length=1, alias="Name")
    parent_case: Optional[str] = Field(None, alias="ParentCase")
    case_length: float = Field(0, alias="CaseLength")
    overall_length: float = Field(0, alias="OverallLength")
    rim_diameter: float = Field(0, alias="RimDiameter")
    base_diameter: float = Field(0, alias="BaseDiameter")
    neck_diameter: float = Field(0, alias="NeckDiameter")
    shoulder_angle: Optional[float] = Field(None, alias="ShoulderAngle")
    max_pressure_psi: int = Field(0, alias="MaxPressurePsi")
    primer_type: Optional[str] = Field(None, alias="PrimerType")


class GRTPowderRecord(GRTRecord):
    manufacturer: str = Field(..., min_length=1, alias="Manufacturer")
    name: str = Field(..., min_length=1, alias="Name")
    type: Optional[str] = Field(None, alias="Type")
    burn_rate: Optional[float] = Field(None, alias="BurnRate")


class GRTPrimerRecord(GRTRecord):
    manufacturer: str = Field(..., min_length=1, alias="Manufacturer")
    name: str = Field(..., min_length=1, alias="Name")
    type: Optional[str] = Field(None, alias="Type")  # Small Pistol, Large Rifle, etc.


class GRTCaseRecord(GRTRecord):
    """A lot of brass; ``Id`` doubles as the lot number"""

    cartridge_name: Optional[str] = Field(None, alias="CartridgeName")
    quantity: int = Field(0, alias="Quantity")
    times_fired: int = Field(0, alias="TimesFired")
    annealed: bool = Field(False, alias="Annealed")


class GRTFactoryAmmoRecord(GRTRecord):
    """Factory load; ``Id`` is the SKU"""

    manufacturer: str = Field(..., min_length=1, alias="Manufacturer")
    cartridge: Optional[str] = Field(None, alias="Cartridge")
    projectile: Optional[str] = Field(None, alias="Projectile")
    bullet_weight: float = Field(0, alias="BulletWeight")
    velocity: Optional[int] = Field(None, alias="Velocity")
    energy: Optional[int] = Field(None, alias="Energy")
