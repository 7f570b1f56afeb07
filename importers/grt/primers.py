"""
Primer rules: keyed by (Name, Manufacturer) as literal strings
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from importers.engine import ImportRules
from models.primer import Primer
from schemas.grt import GRTPrimerRecord


async def find_primer(db_session: AsyncSession, record: GRTPrimerRecord) -> Optional[Primer]:
    result = await db_session.execute(
        select(Primer)
        .where(
            Primer.name == record.name,
            Primer.manufacturer == record.manufacturer
        )
        .order_by(Primer.id)
        .limit(1)
    )
    return result.scalars().first()


async def build_primer(db_session: AsyncSession, record: GRTPrimerRecord) -> Primer:
    return Primer(
        manufacturer=record.manufacturer,
        name=record.name,
        type=record.type
    )


PRIMER_RULES = ImportRules(
    entity_type="Primer",
    model=Primer,
    schema=GRTPrimerRecord,
    file_name="primers.json",
    find=find_primer,
    construct=build_primer,
    merge_fields={"type": "type"},
)
