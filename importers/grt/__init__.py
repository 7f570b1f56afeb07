"""
Mapping rules for GRT (Gordon's Reloading Tool) JSON exports.

GRT_IMPORT_STEPS is the order the runner imports files in. Factory ammo
resolves its manufacturer, cartridge and projectile by name, so it goes
after the files that create those rows; case lots resolve their
cartridge by name, so they go after cartridges. Nothing enforces this
beyond the order itself: a run that skips cartridges.json still imports
factory_ammo.json, just with empty cartridge references.
"""

from importers.grt.projectiles import PROJECTILE_RULES
from importers.grt.cartridges import CARTRIDGE_RULES
from importers.grt.powders import POWDER_RULES
from importers.grt.primers import PRIMER_RULES
from importers.grt.cases import CASE_RULES
from importers.grt.factory_ammo import FACTORY_AMMO_RULES

GRT_IMPORT_STEPS = (
    PROJECTILE_RULES,
    CARTRIDGE_RULES,
    POWDER_RULES,
    PRIMER_RULES,
    CASE_RULES,
    FACTORY_AMMO_RULES,
)

__all__ = [
    "GRT_IMPORT_STEPS",
    "PROJECTILE_RULES",
    "CARTRIDGE_RULES",
    "POWDER_RULES",
    "PRIMER_RULES",
    "CASE_RULES",
    "FACTORY_AMMO_RULES",
]
