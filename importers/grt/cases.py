"""
Case rules: GRT "cases" become CartridgeLot rows keyed by
(cartridge name, lot number), where the lot number is the record Id.
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from importers.lookups import find_cartridge_by_name
from models.cartridge import Cartridge
from models.cartridge_lot import CartridgeLot
from schemas.grt import GRTCaseRecord


async def find_cartridge_lot(db_session: AsyncSession, record: GRTCaseRecord) -> Optional[CartridgeLot]:
    query = (
        select(CartridgeLot)
        .outerjoin(CartridgeLot.cartridge)
        .where(CartridgeLot.lot_number == record.source_id)
    )

    if record.cartridge_name is None:
        query = query.where(CartridgeLot.cartridge_id.is_(None))
    else:
        # Lots whose cartridge could not be resolved never match a named record
        query = query.where(Cartridge.name == record.cartridge_name)

    result = await db_session.execute(query.order_by(CartridgeLot.id).limit(1))
    return result.scalars().first()


async def build_cartridge_lot(db_session: AsyncSession, record: GRTCaseRecord) -> CartridgeLot:
    cartridge = await find_cartridge_by_name(db_session, record.cartridge_name)

    return CartridgeLot(
        cartridge=cartridge,
        lot_number=record.source_id,
        quantity=record.quantity,
        times_fired=record.times_fired,
        annealed=record.annealed
    )


CASE_RULES = ImportRules(
    entity_type="CartridgeLot",
    model=CartridgeLot,
    schema=GRTCaseRecord,
    file_name="cases.json",
    find=find_cartridge_lot,
    construct=build_cartridge_lot,
    merge_fields={
        "quantity": "quantity",
        "times_fired": "times_fired",
        "annealed": "annealed",
    },
)
