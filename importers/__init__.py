"""
Import pipeline for third-party reloading data exports.

Modules:
    engine: Generic find-or-create-or-merge import of one JSON file
    lookups: Name-based resolution of manufacturers, cartridges, projectiles
    runner: Orchestrator running every import step against a folder

Subpackages:
    grt: Mapping rules for GRT exports (one module per entity type)

Architecture:
    Every entity type supplies an ImportRules value:

    1. find - look up an existing row by business key
    2. construct - build a new row, resolving related rows by name
    3. merge_fields - attributes overwritten when the row already exists

    The engine applies the same algorithm to every rule set and appends
    one ExternalSourceMap provenance row per imported record.

Usage:
    from importers.runner import ImportRunner

    async with get_db_session() as session:
        runner = ImportRunner(session)
        results = await runner.run_all("/data/grt", progress=print)

Error Handling:
    All failures are raised as core.exceptions.ImportException subclasses.
    A missing file is reported as a skipped step, not an error.
"""

from importers.engine import ImportRules, import_file
from importers.runner import ImportRunner

__all__ = [
    "ImportRules",
    "ImportRunner",
    "import_file",
]
