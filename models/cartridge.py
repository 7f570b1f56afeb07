from sqlalchemy import Column, Integer, String, Float
from models.base import Base


class Cartridge(Base):
    """Cartridge specification ("9mm Luger", ".308 Winchester"), keyed by name"""
    __tablename__ = "cartridges"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(100), nullable=False, index=True)
    parent_case = Column(String(100), nullable=True)

    # Dimensions (inches)
    case_length = Column(Float, nullable=True)
    overall_length = Column(Float, nullable=True)
    rim_diameter = Column(Float, nullable=True)
    base_diameter = Column(Float, nullable=True)
    neck_diameter = Column(Float, nullable=True)
    shoulder_angle = Column(Float, nullable=True)

    max_pressure_psi = Column(Integer, nullable=True)
    primer_type = Column(String(50), nullable=True)  # "Small Pistol", etc.

    notes = Column(String(500), nullable=True)
