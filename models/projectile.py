from sqlalchemy import Column, Integer, String, Float, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base


class Projectile(Base):
    """
    A bullet, identified by (name, manufacturer name).

    Ballistic attributes are measurements and get overwritten on re-import;
    name, caliber and type are fixed once the row exists.
    """
    __tablename__ = "projectiles"

    id = Column(Integer, primary_key=True, autoincrement=True)

    manufacturer_id = Column(Integer, ForeignKey("manufacturers.id"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    caliber = Column(String(50), nullable=True)
    diameter = Column(Float, nullable=True)
    weight_grains = Column(Float, nullable=True)
    type = Column(String(50), nullable=True)

    # Ballistic coefficients
    ballistic_coefficient_g1 = Column(Float, nullable=True)
    ballistic_coefficient_g7 = Column(Float, nullable=True)
    sectional_density = Column(Float, nullable=True)

    notes = Column(String(500), nullable=True)

    # Relationships
    manufacturer = relationship("Manufacturer", back_populates="projectiles")

    __table_args__ = (
        Index("idx_projectile_name_manufacturer", "name", "manufacturer_id"),
    )
