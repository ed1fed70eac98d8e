"""
Pytest fixtures: a throwaway SQLite database per test, an ASGI client with the
database and LLM dependencies overridden, and scripted LLM fakes.
"""

import os

# Must be set before vitalai is imported (settings are cached at import time)
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import vitalai.models  # noqa: F401 - register all tables on Base.metadata
from vitalai.api.deps import get_session_factory
from vitalai.core.errors import LLMResponseError
from vitalai.db.base import Base
from vitalai.db.session import get_db
from vitalai.main import app
from vitalai.services.llm import get_gemini_client, get_groq_client

TEST_USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"


# ---------------------------------------------------------------------------
# LLM fakes
# ---------------------------------------------------------------------------


class _Scripted:
    """Pops canned responses in order; an Exception instance is raised instead."""

    def __init__(self) -> None:
        self.responses: list[Any] = []

    def _next(self) -> str:
        if not self.responses:
            raise LLMResponseError("No scripted response")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeGemini(_Scripted):
    def __init__(self, api_key: str = "AIzaTestKey") -> None:
        super().__init__()
        self.api_key = api_key
        self.prompts: list[str] = []

    async def generate_content(self, prompt: str, temperature: float = 0.7, max_output_tokens: int = 1024, **kwargs):
        self.prompts.append(prompt)
        return self._next()


class FakeGroq(_Scripted):
    def __init__(self, api_key: str = "gsk_test") -> None:
        super().__init__()
        self.api_key = api_key
        self.model = "text-test"
        self.vision_model = "vision-test"
        self.calls: list[dict[str, Any]] = []

    async def chat(self, messages, model=None, max_tokens=1500, temperature=0.3):
        self.calls.append({"messages": messages, "model": model or self.model})
        return self._next()


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def fake_groq() -> FakeGroq:
    return FakeGroq()


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'vitalai-test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# App client
# ---------------------------------------------------------------------------


@pytest.fixture
async def client(session_factory, fake_gemini, fake_groq) -> AsyncGenerator[httpx.AsyncClient, None]:
    """ASGI client; every request gets its own committed session, like get_db."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    app.dependency_overrides[get_groq_client] = lambda: fake_groq
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://testserver",
        headers={"X-User-Id": TEST_USER_ID},
    ) as c:
        yield c
    app.dependency_overrides.clear()
