from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import Request

from src.application.errors import PermissionDenied
from src.config.settings import Settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings


async def get_tenant_id(request: Request) -> UUID:
    settings = get_app_settings(request)
    tenant_value = request.headers.get(settings.tenant_header)
    if not tenant_value:
        raise PermissionDenied("Missing tenant header")
    try:
        return UUID(tenant_value)
    except ValueError as exc:
        raise PermissionDenied("Invalid tenant identifier") from exc


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow
