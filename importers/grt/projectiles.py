"""
Projectile rules: keyed by (Name, Manufacturer name)
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from importers.lookups import get_or_create_manufacturer
from models.manufacturer import Manufacturer
from models.projectile import Projectile
from schemas.grt import GRTProjectileRecord


async def find_projectile(db_session: AsyncSession, record: GRTProjectileRecord) -> Optional[Projectile]:
    result = await db_session.execute(
        select(Projectile)
        .join(Projectile.manufacturer)
        .where(
            Projectile.name == record.name,
            Manufacturer.name == record.manufacturer
        )
        .order_by(Projectile.id)
        .limit(1)
    )
    return result.scalars().first()


async def build_projectile(db_session: AsyncSession, record: GRTProjectileRecord) -> Projectile:
    manufacturer = await get_or_create_manufacturer(db_session, record.manufacturer)

    return Projectile(
        manufacturer=manufacturer,
        name=record.name,
        caliber=record.caliber,
        diameter=record.diameter,
        weight_grains=record.weight,
        type=record.type,
        ballistic_coefficient_g1=record.bc_g1,
        ballistic_coefficient_g7=record.bc_g7,
        sectional_density=record.sd
    )


PROJECTILE_RULES = ImportRules(
    entity_type="Projectile",
    model=Projectile,
    schema=GRTProjectileRecord,
    file_name="projectiles.json",
    find=find_projectile,
    construct=build_projectile,
    merge_fields={
        "diameter": "diameter",
        "weight_grains": "weight",
        "ballistic_coefficient_g1": "bc_g1",
        "ballistic_coefficient_g7": "bc_g7",
        "sectional_density": "sd",
    },
)
