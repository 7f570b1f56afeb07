from sqlalchemy import Column, Integer, String, Float
from models.base import Base


class Firearm(Base):
    """A rifle or handgun in the user's inventory (not imported from GRT)"""
    __tablename__ = "firearms"

    id = Column(Integer, primary_key=True, autoincrement=True)

    manufacturer = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)

    caliber = Column(String(50), nullable=True)
    barrel_length_inches = Column(Float, nullable=True)
    twist_rate = Column(String(20), nullable=True)  # e.g., "1:10"
    action_type = Column(String(50), nullable=True)  # Bolt, Semi-auto, Revolver, etc.

    serial_number = Column(String(100), nullable=True)
    notes = Column(String(500), nullable=True)
