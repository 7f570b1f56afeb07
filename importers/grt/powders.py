"""
Powder rules: keyed by (Name, Manufacturer) as literal strings
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from models.powder import Powder
from schemas.grt import GRTPowderRecord


async def find_powder(db_session: AsyncSession, record: GRTPowderRecord) -> Optional[Powder]:
    # Case-sensitive: "Hodgdon" and "hodgdon" are different powders
    result = await db_session.execute(
        select(Powder)
        .where(
            Powder.name == record.name,
            Powder.manufacturer == record.manufacturer
        )
        .order_by(Powder.id)
        .limit(1)
    )
    return result.scalars().first()


async def build_powder(db_session: AsyncSession, record: GRTPowderRecord) -> Powder:
    return Powder(
        manufacturer=record.manufacturer,
        name=record.name,
        type=record.type,
        burn_rate_rank=record.burn_rate
    )


POWDER_RULES = ImportRules(
    entity_type="Powder",
    model=Powder,
    schema=GRTPowderRecord,
    file_name="powders.json",
    find=find_powder,
    construct=build_powder,
    merge_fields={
        "type": "type",
        "burn_rate_rank": "burn_rate",
    },
)
