"""Pytest configuration and fixtures for chapterhub.

Uses app.main:app for HTTP tests and in-memory repositories for unit and
API tests. Integration tests (tests/integration) skip when DATABASE_URL
is not set.
"""

import asyncio
import itertools
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.v1.dependencies import (
    get_participant_repo,
    get_participant_search_repo,
    get_tenant_repo,
)
from app.application.dtos.participant import ParticipantPage, ParticipantResult
from app.application.dtos.tenant import TenantResult
from app.core.config import get_settings
from app.core.limiter import limiter
from app.domain.enums import TenantStatus
from app.infrastructure.security.jwt import create_access_token
from app.main import app

TENANT_A = "tenant-a"
TENANT_B = "tenant-b"

# Text fields the field-match query looks at (mirrors the SQL repository).
_SEARCH_FIELDS = (
    "full_name_th",
    "full_name_en",
    "nickname_th",
    "nickname_en",
    "phone",
    "company",
    "tagline",
    "notes",
)

_BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


class InMemoryParticipantSearchRepository:
    """IParticipantSearchRepository over a list, with the SQL repository's semantics.

    Case-insensitive literal substring match, tenant and status filters,
    created_at/participant_id ordering, row limits. Tests inject latency
    and failures per query through delays and errors, keyed either by
    method name or "method:argument" (e.g. "search_by_fields:Startup").
    """

    def __init__(
        self,
        participants: Sequence[ParticipantResult] = (),
        categories: Sequence[tuple[str, str, str]] = (),
    ) -> None:
        self.participants = list(participants)
        self.categories = list(categories)
        self.calls: list[tuple[str, Any, int | None]] = []
        self.delays: dict[str, float] = {}
        self.errors: dict[str, Exception] = {}
        self.cancelled: list[str] = []

    async def _before(self, method: str, arg: Any = None) -> None:
        specific = f"{method}:{arg}"
        for key in (specific, method):
            if key in self.errors:
                raise self.errors[key]
        delay = self.delays.get(specific, self.delays.get(method))
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(specific if arg is not None else method)
                raise

    def _scoped(self, tenant_id: str, statuses: Sequence[str]) -> list[ParticipantResult]:
        rows = [
            p
            for p in self.participants
            if p.tenant_id == tenant_id and p.status in statuses
        ]
        return sorted(rows, key=lambda p: (p.created_at or _BASE_TIME, p.participant_id))

    async def search_by_fields(
        self, tenant_id: str, keyword: str, statuses: Sequence[str], limit: int
    ) -> list[ParticipantResult]:
        self.calls.append(("search_by_fields", keyword, limit))
        await self._before("search_by_fields", keyword)
        needle = keyword.lower()
        return [
            p
            for p in self._scoped(tenant_id, statuses)
            if any(
                needle in (getattr(p, field) or "").lower() for field in _SEARCH_FIELDS
            )
        ][:limit]

    async def list_tag_candidates(
        self, tenant_id: str, statuses: Sequence[str], limit: int
    ) -> list[ParticipantResult]:
        self.calls.append(("list_tag_candidates", None, limit))
        await self._before("list_tag_candidates")
        return [p for p in self._scoped(tenant_id, statuses) if p.tags is not None][
            :limit
        ]

    async def search_by_category(
        self, tenant_id: str, category_code: str, statuses: Sequence[str], limit: int
    ) -> list[ParticipantResult]:
        self.calls.append(("search_by_category", category_code, limit))
        await self._before("search_by_category", category_code)
        return [
            p
            for p in self._scoped(tenant_id, statuses)
            if p.business_type_code == category_code
        ][:limit]

    async def find_category_codes(self, term: str) -> list[str]:
        self.calls.append(("find_category_codes", term, None))
        await self._before("find_category_codes")
        needle = term.lower()
        return sorted(
            code
            for code, name_th, name_en in self.categories
            if needle in name_th.lower() or needle in name_en.lower()
        )

    def methods_called(self) -> list[str]:
        return [name for name, _, _ in self.calls]


class InMemoryParticipantRepository:
    """IParticipantRepository over a list (newest first, like the SQL repository)."""

    def __init__(self, participants: Sequence[ParticipantResult] = ()) -> None:
        self.participants = list(participants)

    async def get_by_id_and_tenant(
        self, participant_id: str, tenant_id: str
    ) -> ParticipantResult | None:
        for p in self.participants:
            if p.participant_id == participant_id and p.tenant_id == tenant_id:
                return p
        return None

    async def list_by_tenant(
        self,
        tenant_id: str,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> ParticipantPage:
        rows = [
            p
            for p in self.participants
            if p.tenant_id == tenant_id and (status is None or p.status == status)
        ]
        rows.sort(key=lambda p: (p.created_at or _BASE_TIME), reverse=True)
        return ParticipantPage(
            items=rows[offset : offset + limit],
            total=len(rows),
            limit=limit,
            offset=offset,
        )


class InMemoryTenantRepository:
    """ITenantRepository with a fixed set of tenants."""

    def __init__(self, tenant_ids: Sequence[str] = (TENANT_A, TENANT_B)) -> None:
        self.tenants = {
            tid: TenantResult(id=tid, code=tid, name=tid.title(), status=TenantStatus.ACTIVE)
            for tid in tenant_ids
        }

    async def get_by_id(self, tenant_id: str) -> TenantResult | None:
        return self.tenants.get(tenant_id)

    async def get_by_code(self, code: str) -> TenantResult | None:
        return next((t for t in self.tenants.values() if t.code == code), None)


@pytest.fixture
def make_participant() -> Callable[..., ParticipantResult]:
    """Factory for ParticipantResult rows; each call is one minute newer than the last."""
    counter = itertools.count(1)

    def _make(
        participant_id: str | None = None,
        tenant_id: str = TENANT_A,
        status: str = "member",
        **fields: Any,
    ) -> ParticipantResult:
        n = next(counter)
        fields.setdefault("created_at", _BASE_TIME + timedelta(minutes=n))
        return ParticipantResult(
            participant_id=participant_id or f"p{n:03d}",
            tenant_id=tenant_id,
            status=status,
            **fields,
        )

    return _make


@pytest.fixture
def search_repo() -> InMemoryParticipantSearchRepository:
    """Empty in-memory search repository; tests add participants and categories."""
    return InMemoryParticipantSearchRepository()


@pytest.fixture
def participant_repo() -> InMemoryParticipantRepository:
    """Empty in-memory participant directory repository."""
    return InMemoryParticipantRepository()


@pytest.fixture
def token_for() -> Callable[..., str]:
    """Build a bearer token for the given claims (sub defaults to user-1)."""

    def _token(tenant_id: str | None = TENANT_A, **claims: Any) -> str:
        claims.setdefault("sub", "user-1")
        if tenant_id is not None:
            claims["tenant_id"] = tenant_id
        return create_access_token(claims)

    return _token


@pytest.fixture
def auth_headers(token_for: Callable[..., str]) -> dict[str, str]:
    """Headers for a regular user of TENANT_A."""
    return {
        "Authorization": f"Bearer {token_for(TENANT_A)}",
        "X-Tenant-ID": TENANT_A,
    }


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set env vars for Settings and reload; the cache is cleared again after the test."""

    def _set(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key.upper(), value)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api_client(
    client: AsyncClient,
    search_repo: InMemoryParticipantSearchRepository,
    participant_repo: InMemoryParticipantRepository,
) -> AsyncClient:
    """HTTP client with repositories swapped for in-memory ones (no database)."""
    tenant_repo = InMemoryTenantRepository()
    app.dependency_overrides[get_tenant_repo] = lambda: tenant_repo
    app.dependency_overrides[get_participant_search_repo] = lambda: search_repo
    app.dependency_overrides[get_participant_repo] = lambda: participant_repo
    yield client
    app.dependency_overrides.clear()

