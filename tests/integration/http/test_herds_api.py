from __future__ import annotations

from uuid import uuid4


async def test_requests_without_valid_token_are_rejected(client):
    missing = await client.post("/api/v1/herds/active")
    assert missing.status_code == 401
    assert missing.json() == {"error": "Missing Authorization header"}

    bogus = await client.post(
        "/api/v1/herds/create",
        json={"name": "A"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert bogus.status_code == 401
    assert bogus.json() == {"error": "Token validation failed"}

    health = await client.get("/api/v1/health")
    assert health.status_code == 200


async def test_herd_lifecycle_over_http(client, auth_headers):
    headers = auth_headers(uuid4())

    created = await client.post(
        "/api/v1/herds/create", json={"name": "A", "description": "heifers"}, headers=headers
    )
    assert created.status_code == 201
    assert created.json()["herd_name"] == "A"

    for animal in ("X", "Y", "Z"):
        resp = await client.post(
            "/api/v1/herds/add-member",
            json={"herd_name": "A", "animal_id": animal},
            headers=headers,
        )
        assert resp.status_code == 200
        assert resp.json() == {}

    split = await client.post(
        "/api/v1/herds/split",
        json={"source_name": "A", "target_name": "B", "animal_ids": ["Y", "Z"]},
        headers=headers,
    )
    assert split.status_code == 200

    members = await client.post("/api/v1/herds/members", json={"herd_name": "B"}, headers=headers)
    assert members.json() == {"animals": ["Y", "Z"]}

    removed = await client.post(
        "/api/v1/herds/remove-member",
        json={"herd_name": "B", "animal_id": "Z"},
        headers=headers,
    )
    assert removed.status_code == 200
    not_member = await client.post(
        "/api/v1/herds/remove-member",
        json={"herd_name": "B", "animal_id": "Z"},
        headers=headers,
    )
    assert not_member.status_code == 409
    assert not_member.json() == {"error": "Animal 'Z' is not a member of herd 'B'."}

    moved = await client.post(
        "/api/v1/herds/move-member",
        json={"source_name": "A", "target_name": "B", "animal_id": "X"},
        headers=headers,
    )
    assert moved.status_code == 200

    merged = await client.post(
        "/api/v1/herds/merge", json={"keep_name": "B", "archive_name": "A"}, headers=headers
    )
    assert merged.status_code == 200

    active = await client.post("/api/v1/herds/active", headers=headers)
    assert active.json() == {"herds": [{"name": "B", "description": None, "archived": False}]}
    archived = await client.post("/api/v1/herds/archived", headers=headers)
    assert archived.json() == {
        "herds": [{"name": "A", "description": "heifers", "archived": True}]
    }

    deleted = await client.post("/api/v1/herds/delete", json={"herd_name": "A"}, headers=headers)
    assert deleted.json() == {"outcome": "deleted"}

    gone = await client.post("/api/v1/herds/members", json={"herd_name": "A"}, headers=headers)
    assert gone.status_code == 404
    assert gone.json() == {"error": "Herd 'A' not found."}


async def test_errors_are_single_field_payloads(client, auth_headers):
    headers = auth_headers(uuid4())
    await client.post("/api/v1/herds/create", json={"name": "A"}, headers=headers)

    duplicate = await client.post("/api/v1/herds/create", json={"name": "A"}, headers=headers)
    assert duplicate.status_code == 409
    assert duplicate.json() == {"error": "Herd 'A' already exists."}

    blank = await client.post("/api/v1/herds/create", json={"name": " "}, headers=headers)
    assert blank.status_code == 422
    assert blank.json() == {"error": "Herd name cannot be empty."}

    malformed = await client.post("/api/v1/herds/add-member", json={}, headers=headers)
    assert malformed.status_code == 422
    assert list(malformed.json()) == ["error"]

    partial = await client.post(
        "/api/v1/herds/split",
        json={"source_name": "A", "target_name": "B", "animal_ids": ["Q"]},
        headers=headers,
    )
    assert partial.status_code == 409
    assert "Q" in partial.json()["error"]


async def test_owners_do_not_see_each_other(client, auth_headers):
    u1, u2 = auth_headers(uuid4()), auth_headers(uuid4())
    for headers in (u1, u2):
        resp = await client.post(
            "/api/v1/herds/create", json={"name": "Pasture A"}, headers=headers
        )
        assert resp.status_code == 201

    await client.post(
        "/api/v1/herds/add-member",
        json={"herd_name": "Pasture A", "animal_id": "X"},
        headers=u1,
    )

    theirs = await client.post(
        "/api/v1/herds/members", json={"herd_name": "Pasture A"}, headers=u2
    )
    assert theirs.json() == {"animals": []}
