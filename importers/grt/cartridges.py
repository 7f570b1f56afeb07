"""
Cartridge rules: keyed by Name
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from models.cartridge import Cartridge
from schemas.grt import GRTCartridgeRecord

# Everything except the name is a measurement and follows the export
CARTRIDGE_FIELDS = {
    "parent_case": "parent_case",
    "case_length": "case_length",
    "overall_length": "overall_length",
    "rim_diameter": "rim_diameter",
    "base_diameter": "base_diameter",
    "neck_diameter": "neck_diameter",
    "shoulder_angle": "shoulder_angle",
    "max_pressure_psi": "max_pressure_psi",
    "primer_type": "primer_type",
}


async def find_cartridge(db_session: AsyncSession, record: GRTCartridgeRecord) -> Optional[Cartridge]:
    result = await db_session.execute(
        select(Cartridge).where(Cartridge.name == record.name).order_by(Cartridge.id).limit(1)
    )
    return result.scalars().first()


async def build_cartridge(db_session: AsyncSession, record: GRTCartridgeRecord) -> Cartridge:
    values = {attribute: getattr(record, record_field) for attribute, record_field in CARTRIDGE_FIELDS.items()}
    return Cartridge(name=record.name, **values)


CARTRIDGE_RULES = ImportRules(
    entity_type="Cartridge",
    model=Cartridge,
    schema=GRTCartridgeRecord,
    file_name="cartridges.json",
    find=find_cartridge,
    construct=build_cartridge,
    merge_fields=CARTRIDGE_FIELDS,
)
