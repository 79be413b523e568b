"""API tests for /api/v1/participants (auth, tenant header, search, directory).

Repositories are replaced with in-memory ones via dependency overrides,
so no database is needed.
"""

from httpx import AsyncClient

TENANT_A = "tenant-a"
TENANT_B = "tenant-b"

SEARCH_URL = "/api/v1/participants/search"


def _headers(token: str, tenant_id: str = TENANT_A) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}", "X-Tenant-ID": tenant_id}


def _seed_startup_scenario(search_repo, make_participant) -> None:
    search_repo.participants.extend(
        [
            make_participant("p1", full_name_th="สมชาย", company="Startup Co"),
            make_participant("p2", full_name_th="สมหญิง", tags=["startup", "consulting"]),
            make_participant("p3", full_name_en="Anan", company="Bakery"),
        ]
    )


# ---- Authentication and tenant access ----


async def test_search_without_token_is_401(api_client: AsyncClient) -> None:
    response = await api_client.get(
        SEARCH_URL, params={"q": "x"}, headers={"X-Tenant-ID": TENANT_A}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_search_with_invalid_token_is_401(api_client: AsyncClient) -> None:
    response = await api_client.get(
        SEARCH_URL, params={"q": "x"}, headers=_headers("not-a-jwt")
    )
    assert response.status_code == 401


async def test_search_with_other_tenant_token_is_403(
    api_client: AsyncClient, token_for
) -> None:
    response = await api_client.get(
        SEARCH_URL, params={"q": "x"}, headers=_headers(token_for(TENANT_B))
    )
    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "PERMISSION_DENIED"
    assert body["message"] == "Permission denied: read on tenant"


async def test_super_admin_may_search_any_tenant(
    api_client: AsyncClient, token_for, search_repo, make_participant
) -> None:
    search_repo.participants.append(
        make_participant("b1", tenant_id=TENANT_B, full_name_en="Pim")
    )
    token = token_for(None, is_super_admin=True)
    response = await api_client.get(
        SEARCH_URL, params={"q": "pim"}, headers=_headers(token, TENANT_B)
    )
    assert response.status_code == 200
    assert [p["participant_id"] for p in response.json()["participants"]] == ["b1"]


async def test_missing_tenant_header_is_400(api_client: AsyncClient, token_for) -> None:
    response = await api_client.get(
        SEARCH_URL,
        params={"q": "x"},
        headers={"Authorization": f"Bearer {token_for(TENANT_A)}"},
    )
    assert response.status_code == 400
    assert "X-Tenant-ID" in response.json()["message"]


async def test_malformed_tenant_header_is_400(api_client: AsyncClient, token_for) -> None:
    response = await api_client.get(
        SEARCH_URL,
        params={"q": "x"},
        headers=_headers(token_for(TENANT_A), "tenant a; drop"),
    )
    assert response.status_code == 400
    assert "format" in response.json()["message"]


async def test_unknown_tenant_is_400(api_client: AsyncClient, token_for) -> None:
    response = await api_client.get(
        SEARCH_URL,
        params={"q": "x"},
        headers=_headers(token_for("tenant-zzz"), "tenant-zzz"),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid or unknown tenant"


# ---- Search ----


async def test_startup_search_returns_field_then_tag_match(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    _seed_startup_scenario(search_repo, make_participant)
    response = await api_client.get(
        SEARCH_URL, params={"q": "Startup"}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert [p["participant_id"] for p in body["participants"]] == ["p1", "p2"]
    assert body["count"] == 2
    assert body["has_more"] is False
    assert body["timed_out_queries"] == []
    assert body["limit"] == 10
    assert body["offset"] == 0
    assert "X-Search-Degraded" not in response.headers


async def test_empty_query_returns_empty_page(
    api_client: AsyncClient, auth_headers, search_repo
) -> None:
    response = await api_client.get(SEARCH_URL, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["participants"] == []
    assert search_repo.calls == []


async def test_search_never_returns_other_tenant_rows(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    search_repo.participants.extend(
        [
            make_participant("a1", full_name_en="Somchai"),
            make_participant("b1", tenant_id=TENANT_B, full_name_en="Somchai"),
        ]
    )
    response = await api_client.get(
        SEARCH_URL, params={"q": "somchai"}, headers=auth_headers
    )
    assert [p["participant_id"] for p in response.json()["participants"]] == ["a1"]


async def test_limit_and_offset_page_results(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    search_repo.participants.extend(
        make_participant(f"p{i}", company="Acme") for i in range(5)
    )
    response = await api_client.get(
        SEARCH_URL,
        params={"q": "acme", "limit": 2, "offset": 2},
        headers=auth_headers,
    )
    body = response.json()
    assert [p["participant_id"] for p in body["participants"]] == ["p2", "p3"]
    assert body["has_more"] is True


async def test_limit_is_clamped_to_configured_max(
    api_client: AsyncClient, auth_headers, settings_env, search_repo, make_participant
) -> None:
    settings_env(search_max_limit="3", search_default_limit="2")
    search_repo.participants.extend(
        make_participant(f"p{i}", company="Acme") for i in range(5)
    )
    response = await api_client.get(
        SEARCH_URL, params={"q": "acme", "limit": 50}, headers=auth_headers
    )
    body = response.json()
    assert body["limit"] == 3
    assert body["count"] == 3


async def test_status_query_overrides_default_filter(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    search_repo.participants.extend(
        [
            make_participant("m", status="member", company="Acme"),
            make_participant("a", status="alumni", company="Acme"),
        ]
    )
    default = await api_client.get(
        SEARCH_URL, params={"q": "acme"}, headers=auth_headers
    )
    alumni = await api_client.get(
        SEARCH_URL, params={"q": "acme", "status": "alumni"}, headers=auth_headers
    )
    assert [p["participant_id"] for p in default.json()["participants"]] == ["m"]
    assert [p["participant_id"] for p in alumni.json()["participants"]] == ["a"]


async def test_unknown_status_is_400(api_client: AsyncClient, auth_headers) -> None:
    response = await api_client.get(
        SEARCH_URL, params={"q": "acme", "status": "vip"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_invalid_limit_is_422(api_client: AsyncClient, auth_headers) -> None:
    response = await api_client.get(
        SEARCH_URL, params={"q": "acme", "limit": 0}, headers=auth_headers
    )
    assert response.status_code == 422


async def test_category_matching_on_request(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    search_repo.categories.append(("FNB", "อาหาร", "Food and Beverage"))
    search_repo.participants.append(
        make_participant("chef", full_name_en="Pim", business_type_code="FNB")
    )
    response = await api_client.get(
        SEARCH_URL,
        params={"q": "food", "categories": "true"},
        headers=auth_headers,
    )
    body = response.json()
    assert body["matching_category_codes"] == ["FNB"]
    assert [p["participant_id"] for p in body["participants"]] == ["chef"]


async def test_timed_out_sub_query_sets_degraded_header(
    api_client: AsyncClient, auth_headers, settings_env, search_repo, make_participant
) -> None:
    settings_env(search_query_timeout_ms="50")
    _seed_startup_scenario(search_repo, make_participant)
    search_repo.delays["search_by_fields"] = 1.0
    response = await api_client.get(
        SEARCH_URL, params={"q": "Startup"}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["timed_out_queries"] == ["field_search_Startup"]
    assert [p["participant_id"] for p in body["participants"]] == ["p2"]
    assert response.headers["X-Search-Degraded"] == "true"


async def test_store_error_still_returns_200(
    api_client: AsyncClient, auth_headers, search_repo, make_participant
) -> None:
    _seed_startup_scenario(search_repo, make_participant)
    search_repo.errors["list_tag_candidates"] = RuntimeError("connection reset")
    response = await api_client.get(
        SEARCH_URL, params={"q": "Startup"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert [p["participant_id"] for p in response.json()["participants"]] == ["p1"]
    assert "X-Search-Degraded" not in response.headers


# ---- Directory ----


async def test_list_participants_newest_first(
    api_client: AsyncClient, auth_headers, participant_repo, make_participant
) -> None:
    participant_repo.participants.extend(
        [
            make_participant("old"),
            make_participant("new"),
            make_participant("other", tenant_id=TENANT_B),
        ]
    )
    response = await api_client.get("/api/v1/participants", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert [p["participant_id"] for p in body["items"]] == ["new", "old"]
    assert body["total"] == 2


async def test_get_participant(
    api_client: AsyncClient, auth_headers, participant_repo, make_participant
) -> None:
    participant_repo.participants.append(
        make_participant("p1", full_name_en="Somchai", tags=["startup"])
    )
    response = await api_client.get("/api/v1/participants/p1", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["full_name_en"] == "Somchai"
    assert body["tags"] == ["startup"]


async def test_get_participant_of_other_tenant_is_404(
    api_client: AsyncClient, auth_headers, participant_repo, make_participant
) -> None:
    participant_repo.participants.append(make_participant("b1", tenant_id=TENANT_B))
    response = await api_client.get("/api/v1/participants/b1", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"
