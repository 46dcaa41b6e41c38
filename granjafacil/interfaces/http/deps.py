from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from granjafacil.config.settings import Settings, get_settings
from granjafacil.infrastructure.db.session import SQLAlchemyUnitOfWork
from granjafacil.utils.datetime_tz import Clock, local_today, utc_now


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(
        session_factory, vaccines=getattr(request.app.state, "vaccine_catalog", None)
    )
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_clock(request: Request) -> Clock:
    return getattr(request.app.state, "clock", None) or utc_now


def get_now(clock: Clock = Depends(get_clock)) -> datetime:
    return clock()


def get_today(
    now: datetime = Depends(get_now), settings: Settings = Depends(get_app_settings)
) -> date:
    """Current calendar day in the farm's timezone."""
    return local_today(now, ZoneInfo(settings.timezone_name))
