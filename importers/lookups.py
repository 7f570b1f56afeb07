"""
Name-based lookups of related rows used by the mapping rules.

Manufacturers are stubbed when missing; cartridges and projectiles are
not, so callers get None and leave the reference empty.
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from models.manufacturer import Manufacturer
from models.cartridge import Cartridge
from models.projectile import Projectile
import logging

logger = logging.getLogger(__name__)


async def get_or_create_manufacturer(db_session: AsyncSession, name: str) -> Manufacturer:
    """Return the manufacturer with this exact name, creating a bare stub if absent"""
    result = await db_session.execute(
        select(Manufacturer).where(Manufacturer.name == name).order_by(Manufacturer.id).limit(1)
    )
    manufacturer = result.scalars().first()

    if manufacturer is None:
        logger.info(f"Creating stub manufacturer: {name}")
        manufacturer = Manufacturer(name=name)
        db_session.add(manufacturer)
        # Later records in the same file must find this row
        await db_session.flush()

    return manufacturer


async def find_cartridge_by_name(db_session: AsyncSession, name: Optional[str]) -> Optional[Cartridge]:
    if name is None:
        return None
    result = await db_session.execute(
        select(Cartridge).where(Cartridge.name == name).order_by(Cartridge.id).limit(1)
    )
    return result.scalars().first()


async def find_projectile_by_name(db_session: AsyncSession, name: Optional[str]) -> Optional[Projectile]:
    """First projectile with this name, whatever its manufacturer"""
    if name is None:
        return None
    result = await db_session.execute(
        select(Projectile).where(Projectile.name == name).order_by(Projectile.id).limit(1)
    )
    return result.scalars().first()
