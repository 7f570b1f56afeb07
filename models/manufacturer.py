from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from models.base import Base


class Manufacturer(Base):
    """
    Maker of projectiles and factory ammunition.

    Importers create a stub row (name only) when a record names a
    manufacturer that is not in the catalog yet.
    """
    __tablename__ = "manufacturers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(100), nullable=False, index=True)
    country = Column(String(50), nullable=True)
    website = Column(String(200), nullable=True)

    # Relationships
    projectiles = relationship("Projectile", back_populates="manufacturer")
    factory_ammo = relationship("FactoryAmmo", back_populates="manufacturer")
