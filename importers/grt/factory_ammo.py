"""
Factory ammo rules: keyed by SKU (the record Id)
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from importers.lookups import (
    find_cartridge_by_name,
    find_projectile_by_name,
    get_or_create_manufacturer,
)
from models.factory_ammo import FactoryAmmo
from schemas.grt import GRTFactoryAmmoRecord


async def find_factory_ammo(db_session: AsyncSession, record: GRTFactoryAmmoRecord) -> Optional[FactoryAmmo]:
    result = await db_session.execute(
        select(FactoryAmmo).where(FactoryAmmo.sku == record.source_id).order_by(FactoryAmmo.id).limit(1)
    )
    return result.scalars().first()


async def build_factory_ammo(db_session: AsyncSession, record: GRTFactoryAmmoRecord) -> FactoryAmmo:
    manufacturer = await get_or_create_manufacturer(db_session, record.manufacturer)
    cartridge = await find_cartridge_by_name(db_session, record.cartridge)
    projectile = await find_projectile_by_name(db_session, record.projectile)

    return FactoryAmmo(
        manufacturer=manufacturer,
        cartridge=cartridge,
        projectile=projectile,
        bullet_weight_grains=record.bullet_weight,
        advertised_velocity_fps=record.velocity,
        advertised_energy_ft_lbs=record.energy,
        sku=record.source_id
    )


FACTORY_AMMO_RULES = ImportRules(
    entity_type="FactoryAmmo",
    model=FactoryAmmo,
    schema=GRTFactoryAmmoRecord,
    file_name="factory_ammo.json",
    find=find_factory_ammo,
    construct=build_factory_ammo,
    merge_fields={
        "bullet_weight_grains": "bullet_weight",
        "advertised_velocity_fps": "velocity",
        "advertised_energy_ft_lbs": "energy",
    },
)
