"""
Pydantic schemas for import record validation.

Modules:
    grt: Record shapes of the GRT (Gordon's Reloading Tool) JSON exports

Usage:
    from schemas.grt import GRTProjectileRecord

    record = GRTProjectileRecord(**raw)
    record.bc_g1  # value of "BC_G1" in the export
"""

from schemas.grt import (
    GRTRecord,
    GRTProjectileRecord,
    GRTCartridgeRecord,
    GRTPowderRecord,
    GRTPrimerRecord,
    GRTCaseRecord,
    GRTFactoryAmmoRecord,
)

__all__ = [
    "GRTRecord",
    "GRTProjectileRecord",
    "GRTCartridgeRecord",
    "GRTPowderRecord",
    "GRTPrimerRecord",
    "GRTCaseRecord",
    "GRTFactoryAmmoRecord",
]
