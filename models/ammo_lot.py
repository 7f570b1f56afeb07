from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from models.base import Base


class AmmoLot(Base):
    """A batch of hand-loaded rounds (not imported from GRT)"""
    __tablename__ = "ammo_lots"

    id = Column(Integer, primary_key=True, autoincrement=True)

    cartridge_id = Column(Integer, ForeignKey("cartridges.id"), nullable=False, index=True)
    projectile_id = Column(Integer, ForeignKey("projectiles.id"), nullable=False, index=True)
    powder_id = Column(Integer, ForeignKey("powders.id"), nullable=True)

    powder_charge_grains = Column(Float, nullable=True)
    cartridge_overall_length = Column(Float, nullable=True)

    quantity = Column(Integer, nullable=False, default=0)

    lot_number = Column(String(100), nullable=True)  # User-defined or factory lot
    date_loaded = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    notes = Column(String(500), nullable=True)

    # Relationships
    cartridge = relationship("Cartridge")
    projectile = relationship("Projectile")
    powder = relationship("Powder")
