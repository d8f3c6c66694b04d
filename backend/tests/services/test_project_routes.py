"""Project Routes — INDEX / SHOW / CREATE / UPDATE / DESTROY over HTTP.

Invariants:
    - Protected routes answer 401 before touching storage when no token is sent
    - CREATE binds owner to the token's principal, ignoring any client value
    - Unknown ids answer 404 on SHOW, PATCH and DELETE
    - DELETE by a non-owner answers 401 and the project survives
    - PATCH answers 201, drops blank fields, never changes owner
"""

from sqlalchemy import select

from pairwork.models.project import Project


# --- INDEX --------------------------------------------------------------------

async def test_index_requires_token(client):
    res = await client.get("/projects")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_index_rejects_garbage_token(client):
    res = await client.get(
        "/projects", headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert res.status_code == 401


async def test_index_empty_collection(client, auth_headers):
    res = await client.get("/projects", headers=auth_headers("alice"))
    assert res.status_code == 200
    assert res.json() == {"projects": []}


async def test_index_lists_all_projects(client, auth_headers, seed_project, seed_two_party_project):
    res = await client.get("/projects", headers=auth_headers("zed"))
    assert res.status_code == 200
    ids = {p["id"] for p in res.json()["projects"]}
    assert ids == {seed_project.id, seed_two_party_project.id}


# --- SHOW ---------------------------------------------------------------------

async def test_show_returns_wrapped_project(client, auth_headers, seed_two_party_project):
    res = await client.get(
        f"/projects/{seed_two_party_project.id}", headers=auth_headers("zed"),
    )
    assert res.status_code == 200
    project = res.json()["project"]
    assert project["id"] == seed_two_party_project.id
    assert project["owner"] == "alice"
    assert project["user1"] == "alice"
    assert project["user2"] == "bob"
    assert "createdAt" in project
    assert "updatedAt" in project


async def test_show_nonexistent_returns_404(client, auth_headers):
    res = await client.get("/projects/does-not-exist", headers=auth_headers("alice"))
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_show_requires_token(client, seed_project):
    res = await client.get(f"/projects/{seed_project.id}")
    assert res.status_code == 401


# --- CREATE -------------------------------------------------------------------

async def test_create_binds_owner_to_requester(client, auth_headers):
    res = await client.post(
        "/projects", json={"project": {"user1": "u1"}},
        headers=auth_headers("u1"),
    )
    assert res.status_code == 201
    project = res.json()["project"]
    assert project["owner"] == "u1"
    assert project["user1"] == "u1"
    assert "user2" not in project
    assert project["messages"] == []


async def test_create_overwrites_client_supplied_owner(client, auth_headers, test_db):
    res = await client.post(
        "/projects",
        json={"project": {"user1": "u1", "owner": "mallory"}},
        headers=auth_headers("u1"),
    )
    assert res.status_code == 201
    assert res.json()["project"]["owner"] == "u1"

    stored = (await test_db.execute(
        select(Project).where(Project.id == res.json()["project"]["id"]),
    )).scalar_one()
    assert stored.owner == "u1"


async def test_create_accepts_messages_and_emails(client, auth_headers):
    res = await client.post(
        "/projects",
        json={"project": {
            "title": "Pairing",
            "user1": "u1",
            "user2": "u2",
            "user1Email": "u1@example.com",
            "messages": [{"content": "hi", "owner": "u1"}],
        }},
        headers=auth_headers("u1"),
    )
    assert res.status_code == 201
    project = res.json()["project"]
    assert project["user1Email"] == "u1@example.com"
    assert project["messages"] == [{"content": "hi", "owner": "u1"}]


async def test_create_without_user1_is_validation_error(client, auth_headers):
    res = await client.post(
        "/projects", json={"project": {"title": "x"}},
        headers=auth_headers("u1"),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_message_without_owner_is_validation_error(client, auth_headers):
    res = await client.post(
        "/projects",
        json={"project": {"user1": "u1", "messages": [{"content": "hi"}]}},
        headers=auth_headers("u1"),
    )
    assert res.status_code == 400


async def test_create_duplicate_email_is_conflict(client, auth_headers):
    body = {"project": {"user1": "u1", "user1Email": "same@example.com"}}
    first = await client.post("/projects", json=body, headers=auth_headers("u1"))
    second = await client.post("/projects", json=body, headers=auth_headers("u1"))
    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "DUPLICATE_VALUE"


async def test_create_requires_token(client):
    res = await client.post("/projects", json={"project": {"user1": "u1"}})
    assert res.status_code == 401


# --- UPDATE -------------------------------------------------------------------

async def test_update_returns_201_with_updated_project(client, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}", json={"project": {"title": "Renamed"}},
    )
    assert res.status_code == 201
    assert res.json()["project"]["title"] == "Renamed"


async def test_update_blank_field_leaves_stored_value(client, auth_headers, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}",
        json={"project": {"title": "", "user2": "bob"}},
    )
    assert res.status_code == 201
    project = res.json()["project"]
    assert project["title"] == "Solo"
    assert project["user2"] == "bob"


async def test_update_never_changes_owner(client, auth_headers, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}",
        json={"project": {"owner": "mallory", "title": "Mine now"}},
    )
    assert res.status_code == 201
    assert res.json()["project"]["owner"] == "alice"

    shown = await client.get(
        f"/projects/{seed_project.id}", headers=auth_headers("alice"),
    )
    assert shown.json()["project"]["owner"] == "alice"


async def test_update_replaces_messages_list(client, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}",
        json={"project": {"messages": [
            {"content": "one", "owner": "alice"},
            {"content": "two", "owner": "alice"},
        ]}},
    )
    assert res.status_code == 201
    assert [m["content"] for m in res.json()["project"]["messages"]] == ["one", "two"]


async def test_update_null_messages_is_rejected_and_index_still_serves(client, auth_headers, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}", json={"project": {"messages": None}},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    listed = await client.get("/projects", headers=auth_headers("alice"))
    assert listed.status_code == 200
    assert listed.json()["projects"][0]["messages"] == []

    shown = await client.get(
        f"/projects/{seed_project.id}", headers=auth_headers("alice"),
    )
    assert shown.status_code == 200


async def test_update_null_user1_is_validation_error_not_conflict(client, auth_headers, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}", json={"project": {"user1": None}},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("project") for d in error["details"])

    shown = await client.get(
        f"/projects/{seed_project.id}", headers=auth_headers("alice"),
    )
    assert shown.json()["project"]["user1"] == "alice"


async def test_update_null_optional_field_clears_it(client, seed_two_party_project):
    res = await client.patch(
        f"/projects/{seed_two_party_project.id}", json={"project": {"user2": None}},
    )
    assert res.status_code == 201
    assert "user2" not in res.json()["project"]


async def test_update_null_payload_is_validation_error(client, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}", json={"project": None},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_nonexistent_returns_404(client):
    res = await client.patch(
        "/projects/does-not-exist", json={"project": {"title": "x"}},
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_without_envelope_is_validation_error(client, seed_project):
    res = await client.patch(
        f"/projects/{seed_project.id}", json={"title": "x"},
    )
    assert res.status_code == 400


# --- DESTROY ------------------------------------------------------------------

async def test_destroy_by_owner_returns_204(client, auth_headers, seed_project, test_db):
    res = await client.delete(
        f"/projects/{seed_project.id}", headers=auth_headers("alice"),
    )
    assert res.status_code == 204
    assert res.content == b""

    result = await test_db.execute(
        select(Project).where(Project.id == seed_project.id),
    )
    assert result.scalar_one_or_none() is None


async def test_destroy_by_non_owner_is_refused(client, auth_headers, seed_project):
    res = await client.delete(
        f"/projects/{seed_project.id}", headers=auth_headers("mallory"),
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "NOT_OWNER"

    still_there = await client.get(
        f"/projects/{seed_project.id}", headers=auth_headers("alice"),
    )
    assert still_there.status_code == 200


async def test_destroy_nonexistent_returns_404(client, auth_headers):
    res = await client.delete(
        "/projects/does-not-exist", headers=auth_headers("alice"),
    )
    assert res.status_code == 404


async def test_destroy_requires_token(client, seed_project):
    res = await client.delete(f"/projects/{seed_project.id}")
    assert res.status_code == 401


async def test_operations_after_delete_are_404(client, auth_headers, seed_project):
    await client.delete(f"/projects/{seed_project.id}", headers=auth_headers("alice"))

    show = await client.get(f"/projects/{seed_project.id}", headers=auth_headers("alice"))
    patch = await client.patch(
        f"/projects/{seed_project.id}", json={"project": {"title": "x"}},
    )
    again = await client.delete(f"/projects/{seed_project.id}", headers=auth_headers("alice"))
    assert (show.status_code, patch.status_code, again.status_code) == (404, 404, 404)
