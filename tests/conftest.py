"""
Pytest configuration and fixtures
"""

import json
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from models import Base


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path):
    """Create test database engine"""
    database_url = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite+aiosqlite:///{tmp_path / 'catalog_test.db'}"
    )
    engine = create_async_engine(
        database_url,
        echo=False,
        poolclass=NullPool,  # Disable connection pooling for tests
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables after test
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests"""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload into the import folder and return its path"""
    folder = tmp_path / "grt"
    folder.mkdir(exist_ok=True)

    def _write(file_name, payload):
        path = folder / file_name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


class ProgressRecorder(list):
    """Progress sink collecting messages in order"""

    def __call__(self, message):
        self.append(message)


@pytest.fixture
def progress_messages():
    return ProgressRecorder()


@pytest.fixture
def eldx_record():
    """GRT projectile record"""
    return {
        "Id": "P1",
        "Manufacturer": "Hornady",
        "Name": "ELD-X",
        "Caliber": ".308",
        "Diameter": 0.308,
        "Weight": 178,
        "Type": "BTHP",
        "BC_G1": 0.552,
        "BC_G7": 0.280,
        "SD": 0.268
    }


@pytest.fixture
def cartridge_records():
    """GRT cartridge records"""
    return [
        {
            "Id": "C1",
            "Name": ".308 Winchester",
            "ParentCase": ".300 Savage",
            "CaseLength": 2.015,
            "OverallLength": 2.810,
            "RimDiameter": 0.473,
            "BaseDiameter": 0.470,
            "NeckDiameter": 0.343,
            "ShoulderAngle": 20,
            "MaxPressurePsi": 62000,
            "PrimerType": "Large Rifle"
        },
        {
            "Id": "C2",
            "Name": "9mm Luger",
            "CaseLength": 0.754,
            "OverallLength": 1.169,
            "RimDiameter": 0.394,
            "BaseDiameter": 0.391,
            "NeckDiameter": 0.380,
            "MaxPressurePsi": 35000,
            "PrimerType": "Small Pistol"
        }
    ]


@pytest.fixture
def powder_records():
    """GRT powder records"""
    return [
        {"Id": "W1", "Manufacturer": "Hodgdon", "Name": "H4350", "Type": "Extruded", "BurnRate": 95},
        {"Id": "W2", "Manufacturer": "Hodgdon", "Name": "Titegroup", "Type": "Flake", "BurnRate": 12},
    ]


@pytest.fixture
def primer_records():
    """GRT primer records"""
    return [
        {"Id": "R1", "Manufacturer": "CCI", "Name": "CCI 450", "Type": "Small Rifle Magnum"},
        {"Id": "R2", "Manufacturer": "Federal", "Name": "Federal 210M", "Type": "Large Rifle"},
    ]


@pytest.fixture
def case_records():
    """GRT case (brass lot) records"""
    return [
        {"Id": "LOT-2024-01", "CartridgeName": ".308 Winchester", "Quantity": 100, "TimesFired": 2, "Annealed": True},
        {"Id": "LOT-2024-02", "CartridgeName": "6.5 Creedmoor", "Quantity": 50, "TimesFired": 0, "Annealed": False},
    ]


@pytest.fixture
def factory_ammo_records():
    """GRT factory ammunition records"""
    return [
        {
            "Id": "80964",
            "Manufacturer": "Hornady",
            "Cartridge": ".308 Winchester",
            "Projectile": "ELD-X",
            "BulletWeight": 178,
            "Velocity": 2600,
            "Energy": 2672
        }
    ]
