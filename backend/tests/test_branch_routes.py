"""
HR API Backend — Branch Endpoint Tests
========================================

What:  HTTP-level tests for /api/v1/branches.
How:   `test_client` drives the real app on an in-memory database; error
       scenarios swap the BranchService dependency for a failing mock.

What we test:
    ✅ full create → get → update → delete lifecycle with the success envelope
    ✅ validation failures answer 400 with the exact message, before any store call
    ✅ unknown ids answer 404 {"error": "Branch not found"}
    ✅ store failures answer 500 without leaking details
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from hrapi.services.branch_service import BranchService, get_branch_service

BRANCHES = "/api/v1/branches"


async def _create(client, body) -> dict:
    response = await client.post(BRANCHES, json=body)
    assert response.status_code == 201
    return response.json()["data"]


class TestBranchLifecycle:

    @pytest.mark.asyncio
    async def test_create_branch(self, test_client, sample_branch):
        response = await test_client.post(BRANCHES, json=sample_branch)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Branch created successfully"
        assert body["data"]["id"]
        assert {k: body["data"][k] for k in sample_branch} == sample_branch

    @pytest.mark.asyncio
    async def test_list_branches_empty(self, test_client):
        response = await test_client.get(BRANCHES)

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "data": [],
            "message": "Branches retrieved successfully",
        }

    @pytest.mark.asyncio
    async def test_list_branches(self, test_client, sample_branch):
        await _create(test_client, sample_branch)
        await _create(test_client, {**sample_branch, "name": "Uptown Branch"})

        response = await test_client.get(BRANCHES)

        names = sorted(b["name"] for b in response.json()["data"])
        assert names == ["Downtown Branch", "Uptown Branch"]

    @pytest.mark.asyncio
    async def test_list_ignores_query_string(self, test_client, sample_branch):
        await _create(test_client, sample_branch)

        response = await test_client.get(BRANCHES, params={"page": "2"})

        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    @pytest.mark.asyncio
    async def test_get_branch_by_id(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.get(f"{BRANCHES}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == created
        assert response.json()["message"] == "Branch retrieved successfully"

    @pytest.mark.asyncio
    async def test_partial_update(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.put(
            f"{BRANCHES}/{created['id']}", json={"phone": "204-000-0000"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Branch updated successfully"
        assert response.json()["data"] == {**created, "phone": "204-000-0000"}

        fetched = await test_client.get(f"{BRANCHES}/{created['id']}")
        assert fetched.json()["data"]["phone"] == "204-000-0000"
        assert fetched.json()["data"]["name"] == sample_branch["name"]

    @pytest.mark.asyncio
    async def test_update_with_empty_body_changes_nothing(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.put(f"{BRANCHES}/{created['id']}", json={})

        assert response.status_code == 200
        assert response.json()["data"] == created

    @pytest.mark.asyncio
    async def test_delete_branch(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.delete(f"{BRANCHES}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "data": {},
            "message": "Branch deleted successfully",
        }
        assert (await test_client.get(f"{BRANCHES}/{created['id']}")).status_code == 404


class TestBranchNotFound:

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get(f"{BRANCHES}/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Branch not found"}

    @pytest.mark.asyncio
    async def test_update_unknown(self, test_client):
        response = await test_client.put(f"{BRANCHES}/does-not-exist", json={"name": "X"})

        assert response.status_code == 404
        assert response.json() == {"error": "Branch not found"}

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client):
        response = await test_client.delete(f"{BRANCHES}/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Branch not found"}


class TestBranchValidation:

    @pytest.mark.asyncio
    async def test_empty_name(self, test_client, sample_branch):
        response = await test_client.post(BRANCHES, json={**sample_branch, "name": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Validation error: Body: Branch name cannot be empty"}

    @pytest.mark.asyncio
    async def test_missing_address(self, test_client):
        response = await test_client.post(BRANCHES, json={"name": "A", "phone": "1"})

        assert response.status_code == 400
        assert response.json() == {"error": "Validation error: Body: Branch address is required"}

    @pytest.mark.asyncio
    async def test_invalid_create_stores_nothing(self, test_client, sample_branch):
        await test_client.post(BRANCHES, json={**sample_branch, "phone": ""})

        response = await test_client.get(BRANCHES)

        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_update_with_empty_value(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.put(f"{BRANCHES}/{created['id']}", json={"name": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Validation error: Body: Branch name cannot be empty"}

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_client):
        response = await test_client.post(
            BRANCHES,
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Validation error: Body: Malformed JSON body"}

    @pytest.mark.asyncio
    async def test_null_body_is_rejected(self, test_client, sample_branch):
        created = await _create(test_client, sample_branch)

        response = await test_client.put(
            f"{BRANCHES}/{created['id']}",
            content=b"null",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": 'Validation error: Body: "value" must be of type object'}

    @pytest.mark.asyncio
    async def test_validation_runs_before_service(self, app, test_client):
        store_backed = MagicMock(spec=BranchService)
        store_backed.create = AsyncMock()
        app.dependency_overrides[get_branch_service] = lambda: store_backed

        response = await test_client.post(BRANCHES, json={})

        assert response.status_code == 400
        store_backed.create.assert_not_awaited()


class TestBranchErrors:

    @pytest.mark.asyncio
    async def test_store_failure_is_500(self, app, test_client):
        failing = MagicMock(spec=BranchService)
        failing.get_all = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
        )
        app.dependency_overrides[get_branch_service] = lambda: failing

        response = await test_client.get(BRANCHES, headers={"X-Request-ID": "req-123"})

        assert response.status_code == 500
        assert response.json() == {"error": "A database error occurred", "request_id": "req-123"}
        assert "connection refused" not in response.text

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get(BRANCHES, headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_failed_commit_is_reported_before_response_starts(self, app, sample_branch):
        statuses = []

        async def recording_app(scope, receive, send):
            async def record(message):
                if message["type"] == "http.response.start":
                    statuses.append(message["status"])
                await send(message)

            await app(scope, receive, record)

        transport = ASGITransport(app=recording_app)
        failing_commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
        )
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            with patch.object(AsyncSession, "commit", failing_commit):
                response = await client.post(BRANCHES, json=sample_branch)

            listed = await client.get(BRANCHES)

        assert statuses[0] == 500
        assert response.status_code == 500
        assert response.json()["error"] == "A database error occurred"
        failing_commit.assert_awaited()
        assert listed.json()["data"] == []
