from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from datetime import datetime
from pathlib import Path
from typing import cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import animal_event  # noqa: F401
from src.infrastructure.db.orm.animal_event import AnimalEventORM
from src.interfaces.http.main import create_app

EventRow = tuple[UUID, str, datetime]


@pytest.fixture(scope="session")
def tenant_id() -> UUID:
    return uuid4()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "tenant_header": "X-Tenant-ID",
            "log_level": "INFO",
            "environment": "test",
            "kpi_locale": "en",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def tenant_headers(app, tenant_id: UUID) -> dict[str, str]:
    return {app.state.settings.tenant_header: str(tenant_id)}


@pytest.fixture()
def seed_events(app, client) -> Callable[[UUID, Iterable[EventRow]], Awaitable[None]]:
    async def _seed(tenant: UUID, rows: Iterable[EventRow]) -> None:
        async with app.state.session_factory() as session:  # type: ignore[attr-defined]
            async_session = cast(AsyncSession, session)
            async_session.add_all(
                [
                    AnimalEventORM(
                        id=uuid4(),
                        tenant_id=tenant,
                        animal_id=animal_id,
                        type=event_type,
                        occurred_at=occurred_at,
                        data=None,
                    )
                    for animal_id, event_type, occurred_at in rows
                ]
            )
            await async_session.commit()

    return _seed
