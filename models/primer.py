from sqlalchemy import Column, Integer, String, Index
from models.base import Base


class Primer(Base):
    """Primer, identified by (name, manufacturer) like powders"""
    __tablename__ = "primers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    manufacturer = Column(String(100), nullable=False)  # CCI, Federal, Winchester
    name = Column(String(100), nullable=False)  # "CCI 450", "Federal 205"
    type = Column(String(50), nullable=True)  # Small Rifle, Large Pistol, etc.

    notes = Column(String(500), nullable=True)

    __table_args__ = (
        Index("idx_primer_name_manufacturer", "name", "manufacturer"),
    )
