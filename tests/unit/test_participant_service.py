"""Tests for ParticipantService (directory reads, in-memory repository)."""

import pytest

from app.application.use_cases.participants import MAX_PAGE_SIZE, ParticipantService
from app.domain.exceptions import ResourceNotFoundException, ValidationException


async def test_get_participant_returns_tenant_row(participant_repo, make_participant) -> None:
    participant_repo.participants.append(make_participant("p1", full_name_en="Somchai"))
    result = await ParticipantService(participant_repo).get_participant("tenant-a", "p1")
    assert result.participant_id == "p1"
    assert result.full_name_en == "Somchai"


async def test_get_participant_of_other_tenant_is_not_found(
    participant_repo, make_participant
) -> None:
    participant_repo.participants.append(make_participant("p1", tenant_id="tenant-b"))
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await ParticipantService(participant_repo).get_participant("tenant-a", "p1")
    assert exc_info.value.error_code == "RESOURCE_NOT_FOUND"
    assert exc_info.value.details == {"resource_type": "participant", "resource_id": "p1"}


async def test_list_participants_newest_first_with_total(
    participant_repo, make_participant
) -> None:
    participant_repo.participants.extend(
        [
            make_participant("old"),
            make_participant("mid"),
            make_participant("new"),
            make_participant("elsewhere", tenant_id="tenant-b"),
        ]
    )
    page = await ParticipantService(participant_repo).list_participants(
        "tenant-a", limit=2
    )
    assert [p.participant_id for p in page.items] == ["new", "mid"]
    assert page.total == 3
    assert page.limit == 2
    assert page.offset == 0


async def test_list_participants_filters_by_status(participant_repo, make_participant) -> None:
    participant_repo.participants.extend(
        [make_participant("m", status="member"), make_participant("v", status="visitor")]
    )
    page = await ParticipantService(participant_repo).list_participants(
        "tenant-a", status="visitor"
    )
    assert [p.participant_id for p in page.items] == ["v"]


@pytest.mark.parametrize(("requested", "expected"), [(0, 1), (500, MAX_PAGE_SIZE), (20, 20)])
async def test_list_participants_clamps_limit(participant_repo, requested, expected) -> None:
    page = await ParticipantService(participant_repo).list_participants(
        "tenant-a", limit=requested
    )
    assert page.limit == expected


async def test_list_participants_rejects_unknown_status(participant_repo) -> None:
    with pytest.raises(ValidationException):
        await ParticipantService(participant_repo).list_participants(
            "tenant-a", status="vip"
        )


async def test_list_participants_rejects_negative_offset(participant_repo) -> None:
    with pytest.raises(ValidationException):
        await ParticipantService(participant_repo).list_participants(
            "tenant-a", offset=-1
        )
