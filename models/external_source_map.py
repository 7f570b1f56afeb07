from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from datetime import datetime
from models.base import Base


class ExternalSourceMap(Base):
    """
    Provenance of imported catalog rows.

    Purpose:
    - Audit trail of every imported record, merges included
    - Link catalog rows back to the export they came from
    - Keep the raw record for debugging imports

    Design:
    - Append-only: one row per record per import, never deduplicated
    - entity_type/entity_id is a soft reference (no foreign key), since it
      points into a different table for each entity type
    """
    __tablename__ = "external_source_maps"

    id = Column(Integer, primary_key=True, autoincrement=True)

    entity_type = Column(String(50), nullable=False)  # "Projectile", "Cartridge", etc.
    entity_id = Column(Integer, nullable=False)

    source_name = Column(String(50), nullable=False)  # "GRT"
    source_id = Column(String(100), nullable=True, index=True)

    raw_json = Column(Text, nullable=True)

    imported_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_source_map_entity", "entity_type", "entity_id"),
    )
