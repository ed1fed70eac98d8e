"""Shared request dependencies."""

import uuid

from fastapi import Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vitalai.core.constants import DEFAULT_USER_ID
from vitalai.db.session import async_session_maker


def get_user_id(x_user_id: str | None = Header(default=None)) -> uuid.UUID:
    """Owner of the request's rows: X-User-Id header, else the singleton user."""
    if not x_user_id:
        return DEFAULT_USER_ID
    try:
        return uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="X-User-Id must be a UUID")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_session_maker
