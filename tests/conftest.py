"""
공용 fixture

실행 방법:
    uv sync --all-extras  # dev 의존성 설치
    pytest -v
"""
import os

# config.Settings()가 import 시점에 생성되므로 먼저 설정
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_access_token
from utils.database import get_cursor


class FakeCursor:
    """aiomysql DictCursor 대역: 실행된 쿼리를 기록하고 준비된 결과를 순서대로 반환"""

    def __init__(self):
        self.executed: list[tuple[str, object]] = []
        self.fetchone_results: list[dict | None] = []
        self.fetchall_results: list[list[dict]] = []
        self.rowcount = 1
        self.lastrowid = None
        self.raise_on_execute: Exception | None = None

    async def execute(self, query, args=None):
        self.executed.append((query, args))
        if self.raise_on_execute is not None:
            exc, self.raise_on_execute = self.raise_on_execute, None
            raise exc
        return self.rowcount

    async def fetchone(self):
        return self.fetchone_results.pop(0) if self.fetchone_results else None

    async def fetchall(self):
        return self.fetchall_results.pop(0) if self.fetchall_results else []


@pytest.fixture
def fake_cursor():
    return FakeCursor()


@pytest.fixture
def client(fake_cursor):
    """테스트용 FastAPI 클라이언트 (DB cursor는 FakeCursor로 교체)"""
    async def override_get_cursor():
        yield fake_cursor

    app.dependency_overrides[get_cursor] = override_get_cursor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(data={"sub": "admin", "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(data={"sub": "u1", "is_admin": False})
    return {"Authorization": f"Bearer {token}"}
