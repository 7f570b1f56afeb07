"""
Integration tests for the import runner
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select, func

from core.exceptions import MalformedInputError
from importers.runner import ImportRunner
from models import (
    Cartridge,
    CartridgeLot,
    ExternalSourceMap,
    FactoryAmmo,
    ImportRun,
    ImportStatus,
    Powder,
    Primer,
    Projectile,
)


async def count(db_session, model):
    result = await db_session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def import_runs(db_session):
    result = await db_session.execute(select(ImportRun).order_by(ImportRun.id))
    return result.scalars().all()


@pytest.fixture
def full_export(
    write_json,
    eldx_record,
    cartridge_records,
    powder_records,
    primer_records,
    case_records,
    factory_ammo_records
):
    """Write one file per entity type and return the folder"""
    write_json("projectiles.json", [eldx_record])
    write_json("cartridges.json", cartridge_records)
    write_json("powders.json", powder_records)
    write_json("primers.json", primer_records)
    write_json("cases.json", case_records)
    path = write_json("factory_ammo.json", factory_ammo_records)
    return path.parent


@pytest.mark.asyncio
async def test_run_all_imports_every_file(db_session, full_export, progress_messages):
    runner = ImportRunner(db_session)

    results = await runner.run_all(full_export, progress=progress_messages)

    assert [r["entity_type"] for r in results] == [
        "Projectile", "Cartridge", "Powder", "Primer", "CartridgeLot", "FactoryAmmo"
    ]
    assert all(r["status"] == "success" for r in results)
    assert [r["records_created"] for r in results] == [1, 2, 2, 2, 2, 1]

    assert await count(db_session, Projectile) == 1
    assert await count(db_session, Cartridge) == 2
    assert await count(db_session, Powder) == 2
    assert await count(db_session, Primer) == 2
    assert await count(db_session, CartridgeLot) == 2
    assert await count(db_session, FactoryAmmo) == 1
    assert await count(db_session, ExternalSourceMap) == 10

    # Factory ammo runs last, so its references resolve
    ammo = (await db_session.execute(select(FactoryAmmo))).scalar_one()
    assert ammo.cartridge_id is not None
    assert ammo.projectile_id is not None

    finished = [m for m in progress_messages if m.startswith("Finished importing")]
    assert finished == [
        "Finished importing Projectile (1 items)",
        "Finished importing Cartridge (2 items)",
        "Finished importing Powder (2 items)",
        "Finished importing Primer (2 items)",
        "Finished importing CartridgeLot (2 items)",
        "Finished importing FactoryAmmo (1 items)",
    ]

    runs = await import_runs(db_session)
    assert len(runs) == 6
    assert all(run.status == ImportStatus.SUCCESS for run in runs)
    assert runs[1].entity_type == "Cartridge"
    assert runs[1].records_created == 2
    assert runs[1].completed_at is not None


@pytest.mark.asyncio
async def test_empty_folder_skips_every_step(db_session, tmp_path, progress_messages):
    runner = ImportRunner(db_session)

    results = await runner.run_all(tmp_path, progress=progress_messages)

    assert [r["status"] for r in results] == ["skipped"] * 6
    assert len(progress_messages) == 6
    assert all(m.startswith("Skipping ") and m.endswith("(not found)") for m in progress_messages)

    runs = await import_runs(db_session)
    assert [run.status for run in runs] == [ImportStatus.SKIPPED] * 6


@pytest.mark.asyncio
async def test_missing_files_do_not_stop_later_steps(db_session, write_json, factory_ammo_records):
    folder = write_json("factory_ammo.json", factory_ammo_records).parent
    runner = ImportRunner(db_session)

    results = await runner.run_all(folder)

    assert [r["status"] for r in results] == ["skipped"] * 5 + ["success"]
    assert await count(db_session, FactoryAmmo) == 1


@pytest.mark.asyncio
async def test_failed_step_aborts_remaining_steps(db_session, full_export, write_json):
    write_json("cartridges.json", "{not json")
    runner = ImportRunner(db_session, continue_on_error=False)

    with pytest.raises(MalformedInputError):
        await runner.run_all(full_export)

    # Projectiles were committed before the failure
    assert await count(db_session, Projectile) == 1
    # Nothing after the failing step ran
    assert await count(db_session, Cartridge) == 0
    assert await count(db_session, Powder) == 0
    assert await count(db_session, FactoryAmmo) == 0

    runs = await import_runs(db_session)
    assert [run.status for run in runs] == [ImportStatus.SUCCESS, ImportStatus.FAILED]
    assert runs[1].entity_type == "Cartridge"
    assert runs[1].error_message == "Import file is not valid JSON"
    assert runs[1].completed_at is not None


@pytest.mark.asyncio
async def test_continue_on_error_runs_remaining_steps(db_session, full_export, write_json):
    write_json("cartridges.json", "{not json")
    runner = ImportRunner(db_session, continue_on_error=True)

    results = await runner.run_all(full_export)

    assert [r["status"] for r in results] == [
        "success", "failed", "success", "success", "success", "success"
    ]
    assert results[1]["error"] == "Import file is not valid JSON"
    assert await count(db_session, Powder) == 2

    # Cartridges never imported, so lots and factory ammo have no cartridge
    lots = (await db_session.execute(select(CartridgeLot))).scalars().all()
    assert all(lot.cartridge_id is None for lot in lots)

    runs = await import_runs(db_session)
    assert len(runs) == 6
    assert runs[1].status == ImportStatus.FAILED


@pytest.mark.asyncio
async def test_run_step_uses_rule_file_name(db_session, full_export):
    from importers.grt import POWDER_RULES

    runner = ImportRunner(db_session)

    result = await runner.run_step(POWDER_RULES, full_export)

    assert result["file_path"] == str(full_export / "powders.json")
    assert result["records_created"] == 2
    assert await count(db_session, Projectile) == 0


@pytest.mark.asyncio
async def test_custom_source_name(db_session, full_export):
    from importers.grt import PRIMER_RULES

    runner = ImportRunner(db_session, steps=[PRIMER_RULES], source_name="GRT-test")

    await runner.run_all(full_export)

    source_names = (await db_session.execute(select(ExternalSourceMap.source_name))).scalars().all()
    assert source_names == ["GRT-test", "GRT-test"]
    run = (await import_runs(db_session))[0]
    assert run.source_name == "GRT-test"


@pytest.mark.asyncio
async def test_step_is_recorded_as_running_while_it_imports(db_session, full_export):
    from importers.engine import import_file
    from importers.grt import PRIMER_RULES

    statuses_during_import = []

    async def import_and_observe(*args, **kwargs):
        statuses_during_import.extend(
            (await db_session.execute(select(ImportRun.status))).scalars().all()
        )
        return await import_file(*args, **kwargs)

    runner = ImportRunner(db_session)
    with patch("importers.runner.import_file", AsyncMock(side_effect=import_and_observe)):
        await runner.run_step(PRIMER_RULES, full_export)

    assert statuses_during_import == [ImportStatus.RUNNING]
    runs = await import_runs(db_session)
    assert len(runs) == 1
    assert runs[0].status == ImportStatus.SUCCESS
    assert runs[0].records_created == 2
    assert runs[0].duration_seconds >= 0
