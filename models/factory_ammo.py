from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from models.base import Base


class FactoryAmmo(Base):
    """
    Loaded ammunition sold by a manufacturer, keyed by SKU.

    Cartridge and projectile are resolved by name at import time and may
    be missing; the manufacturer is always present (stubbed if needed).
    """
    __tablename__ = "factory_ammo"

    id = Column(Integer, primary_key=True, autoincrement=True)

    manufacturer_id = Column(Integer, ForeignKey("manufacturers.id"), nullable=False, index=True)
    cartridge_id = Column(Integer, ForeignKey("cartridges.id"), nullable=True, index=True)
    projectile_id = Column(Integer, ForeignKey("projectiles.id"), nullable=True, index=True)

    bullet_weight_grains = Column(Float, nullable=True)
    advertised_velocity_fps = Column(Integer, nullable=True)
    advertised_energy_ft_lbs = Column(Integer, nullable=True)
    test_barrel_length_inches = Column(Float, nullable=True)

    sku = Column(String(50), nullable=True, index=True)
    upc = Column(String(50), nullable=True)

    notes = Column(String(500), nullable=True)

    # Relationships
    manufacturer = relationship("Manufacturer", back_populates="factory_ammo")
    cartridge = relationship("Cartridge")
    projectile = relationship("Projectile")
