from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base


class CartridgeLot(Base):
    """
    A lot of brass cases for one cartridge.

    GRT exports call these "cases". The cartridge reference stays empty
    when the export names a cartridge the catalog does not know.
    """
    __tablename__ = "cartridge_lots"

    id = Column(Integer, primary_key=True, autoincrement=True)

    cartridge_id = Column(Integer, ForeignKey("cartridges.id"), nullable=True, index=True)

    lot_number = Column(String(100), nullable=True)  # User-defined or manufacturer lot
    quantity = Column(Integer, nullable=False, default=0)

    times_fired = Column(Integer, nullable=True)
    annealed = Column(Boolean, nullable=True)

    notes = Column(String(500), nullable=True)

    # Relationships
    cartridge = relationship("Cartridge")

    __table_args__ = (
        Index("idx_cartridge_lot_number", "lot_number", "cartridge_id"),
    )
