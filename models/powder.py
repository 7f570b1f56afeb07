from sqlalchemy import Column, Integer, String, Float, Index
from models.base import Base


class Powder(Base):
    """
    Propellant, identified by (name, manufacturer).

    The manufacturer is a plain string here, not a Manufacturer row.
    """
    __tablename__ = "powders"

    id = Column(Integer, primary_key=True, autoincrement=True)

    manufacturer = Column(String(100), nullable=False)  # Hodgdon, Alliant, Vihtavuori
    name = Column(String(50), nullable=False)  # "H4350", "Titegroup"
    type = Column(String(50), nullable=True)  # Extruded, Ball, Flake

    burn_rate_rank = Column(Float, nullable=True)  # Relative burn rate index
    notes = Column(String(500), nullable=True)

    __table_args__ = (
        Index("idx_powder_name_manufacturer", "name", "manufacturer"),
    )
