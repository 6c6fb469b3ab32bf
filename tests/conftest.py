import sys
from pathlib import Path

# Add project root to Python path FIRST
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Now import after path is set
import logging

import pytest

from buildingblocks.config.settings import DatabaseSettings
from buildingblocks.repositories.sqlalchemy_repository import DatabaseSessionManager
from buildingblocks.utils.logging_utils import clear_logging_context
from sample_domain import Base


@pytest.fixture
async def db_manager():
    """Fresh in-memory SQLite database per test"""
    manager = DatabaseSessionManager(DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def db_session(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture(autouse=True)
def _reset_logging_context():
    clear_logging_context()
    yield
    clear_logging_context()


@pytest.fixture
def trace_logs(caplog):
    """Capture everything down to DEBUG (the facade's trace level)."""
    caplog.set_level(logging.DEBUG)
    return caplog
