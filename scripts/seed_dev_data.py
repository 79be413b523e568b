"""Seed a development chapter into Postgres from scripts/seed-data.json.

Loads tenants (by code; created if missing), business categories (upserted
by category_code) and participants (skipped when the tenant already has a
participant with the same full_name_en or full_name_th).

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Requires: DATABASE_URL (postgresql+asyncpg) and: alembic upgrade head.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.domain.enums import ParticipantStatus, TenantStatus
from app.domain.exceptions import SqlNotConfiguredException
from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.models import BusinessCategory, Participant, Tenant
from app.infrastructure.persistence.repositories.tenant_repo import TenantRepository


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def _get_or_create_tenant(session: AsyncSession, data: dict[str, Any]) -> str:
    existing = await TenantRepository(session).get_by_code(data["code"])
    if existing:
        return existing.id
    tenant = Tenant(
        code=data["code"],
        name=data["name"],
        status=data.get("status", TenantStatus.ACTIVE.value),
    )
    session.add(tenant)
    await session.flush()
    return tenant.id


async def _upsert_category(session: AsyncSession, data: dict[str, Any]) -> None:
    category = await session.get(BusinessCategory, data["category_code"])
    if category is None:
        session.add(BusinessCategory(**data))
        return
    category.name_th = data["name_th"]
    category.name_en = data["name_en"]


async def _participant_exists(
    session: AsyncSession, tenant_id: str, data: dict[str, Any]
) -> bool:
    names = []
    if data.get("full_name_en"):
        names.append(Participant.full_name_en == data["full_name_en"])
    if data.get("full_name_th"):
        names.append(Participant.full_name_th == data["full_name_th"])
    if not names:
        return False
    found = await session.scalar(
        select(Participant.participant_id)
        .where(Participant.tenant_id == tenant_id, or_(*names))
        .limit(1)
    )
    return found is not None


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        print(
            "DATABASE_URL not configured. Set it and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with session_factory() as session:
        async with session.begin():
            for category in data.get("business_categories", []):
                await _upsert_category(session, category)
                print(f"Category {category['category_code']}")
            await session.flush()

            for tenant_data in data.get("tenants", []):
                tenant_id = await _get_or_create_tenant(session, tenant_data)
                print(f"Tenant {tenant_data['code']} -> {tenant_id}")
                for p in tenant_data.get("participants", []):
                    label = p.get("full_name_en") or p.get("full_name_th")
                    if p.get("status", ParticipantStatus.PROSPECT.value) not in ParticipantStatus.values():
                        print(f"  Skip {label}: unknown status {p['status']}", file=sys.stderr)
                        continue
                    if await _participant_exists(session, tenant_id, p):
                        print(f"  Participant {label} already exists, skip")
                        continue
                    participant = Participant(tenant_id=tenant_id, **p)
                    session.add(participant)
                    await session.flush()
                    print(f"  Participant {label} -> {participant.participant_id}")

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
