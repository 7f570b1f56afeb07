"""
SQLAlchemy ORM models for the reloading catalog.

Models:
    base: Base declarative class and shared enums (ImportStatus)
    manufacturer: Projectile and factory ammunition makers
    projectile, cartridge, powder, primer: Reloading components
    cartridge_lot: Lots of brass cases ("cases" in GRT exports)
    factory_ammo: Commercial loaded ammunition
    firearm, ammo_lot: User inventory, not touched by importers
    external_source_map: Provenance of imported rows
    import_run: Import step tracking and metrics

Usage:
    from models import Base, Projectile, ExternalSourceMap

Relationships:
    - Manufacturer → Projectile, FactoryAmmo (one-to-many)
    - Cartridge → CartridgeLot, FactoryAmmo, AmmoLot (one-to-many, optional on lots)
    - ExternalSourceMap → any entity (soft reference by entity_type/entity_id)
"""

from models.base import Base, ImportStatus
from models.manufacturer import Manufacturer
from models.projectile import Projectile
from models.cartridge import Cartridge
from models.powder import Powder
from models.primer import Primer
from models.cartridge_lot import CartridgeLot
from models.factory_ammo import FactoryAmmo
from models.firearm import Firearm
from models.ammo_lot import AmmoLot
from models.external_source_map import ExternalSourceMap
from models.import_run import ImportRun

__all__ = [
    "Base",
    "ImportStatus",
    "Manufacturer",
    "Projectile",
    "Cartridge",
    "Powder",
    "Primer",
    "CartridgeLot",
    "FactoryAmmo",
    "Firearm",
    "AmmoLot",
    "ExternalSourceMap",
    "ImportRun",
]
