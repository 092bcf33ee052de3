"""
CRUD behaviour shared by every resource.

Each test runs once per resource; the route table, required fields and
deleted-row key come from `conftest.RESOURCES`.
"""

import pytest
from httpx import AsyncClient

from conftest import RESOURCES, InMemoryTable

pytestmark = pytest.mark.asyncio

RESOURCE_NAMES = list(RESOURCES)


async def _create(client: AsyncClient, name: str) -> dict:
    case = RESOURCES[name]
    response = await client.post(case.path, json=case.valid)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestCreate:
    async def test_create_returns_201_and_echoes_fields(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        data = await _create(client, name)
        assert isinstance(data["id"], int)
        for field, value in case.valid.items():
            assert data[field] == value

    async def test_create_missing_required_field_returns_400(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        case = RESOURCES[name]
        missing = case.required[0]
        payload = {k: v for k, v in case.valid.items() if k != missing}

        response = await client.post(case.path, json=payload)

        assert response.status_code == 400
        assert missing in response.json()["detail"]
        assert tables[name].statements == 0
        assert tables[name].rows == {}

    async def test_create_empty_required_field_returns_400(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        case = RESOURCES[name]
        payload = {**case.valid, case.required[-1]: ""}

        response = await client.post(case.path, json=payload)

        assert response.status_code == 400
        assert tables[name].rows == {}


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestRead:
    async def test_list_returns_all_rows(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        created = await _create(client, name)

        response = await client.get(case.path)

        assert response.status_code == 200
        rows = response.json()
        assert [row["id"] for row in rows] == [created["id"]]

    async def test_list_empty(self, client: AsyncClient, name: str):
        response = await client.get(RESOURCES[name].path)
        assert response.status_code == 200
        assert response.json() == []

    async def test_get_by_id(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        created = await _create(client, name)

        response = await client.get(f"{case.path}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    async def test_get_unknown_id_returns_404(self, client: AsyncClient, name: str):
        response = await client.get(f"{RESOURCES[name].path}/9999")
        assert response.status_code == 404
        assert response.json()["detail"].endswith("not found.")


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestUpdate:
    async def test_update_then_get_reflects_change(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        created = await _create(client, name)
        field = case.required[-1]
        payload = {**case.valid, field: f"updated-{field}"}

        response = await client.put(f"{case.path}/{created['id']}", json=payload)
        assert response.status_code == 200
        assert response.json()[field] == f"updated-{field}"

        fetched = await client.get(f"{case.path}/{created['id']}")
        assert fetched.json()[field] == f"updated-{field}"

    async def test_update_is_idempotent(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        created = await _create(client, name)
        url = f"{case.path}/{created['id']}"

        first = await client.put(url, json=case.valid)
        second = await client.put(url, json=case.valid)

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()

    async def test_update_unknown_id_returns_404(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        response = await client.put(f"{case.path}/9999", json=case.valid)
        assert response.status_code == 404

    async def test_update_missing_required_field_returns_400(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        case = RESOURCES[name]
        created = await _create(client, name)
        payload = {k: v for k, v in case.valid.items() if k != case.required[0]}

        response = await client.put(f"{case.path}/{created['id']}", json=payload)

        assert response.status_code == 400
        assert tables[name].rows[created["id"]][case.required[0]] == case.valid[case.required[0]]


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestDelete:
    async def test_delete_returns_row_then_get_is_404(self, client: AsyncClient, name: str):
        case = RESOURCES[name]
        created = await _create(client, name)
        url = f"{case.path}/{created['id']}"

        response = await client.delete(url)
        assert response.status_code == 200
        body = response.json()
        assert body["message"].endswith("deleted successfully.")
        assert body[case.deleted_key]["id"] == created["id"]

        assert (await client.get(url)).status_code == 404

    async def test_delete_unknown_id_returns_404(self, client: AsyncClient, name: str):
        response = await client.delete(f"{RESOURCES[name].path}/9999")
        assert response.status_code == 404


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestDatabaseFailure:
    async def test_statement_failure_returns_generic_500(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        tables[name].fail_with = ConnectionRefusedError("connect to 10.0.0.5:5432 refused")

        response = await client.get(RESOURCES[name].path)

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error."}
        assert "10.0.0.5" not in response.text

    async def test_create_failure_returns_generic_500(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        case = RESOURCES[name]
        tables[name].fail_with = RuntimeError("relation does not exist")

        response = await client.post(case.path, json=case.valid)

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error."}


@pytest.mark.parametrize("name", RESOURCE_NAMES)
class TestOutOfRangeId:
    async def test_id_beyond_int4_is_404_without_statement(
        self, client: AsyncClient, tables: dict[str, InMemoryTable], name: str
    ):
        case = RESOURCES[name]
        url = f"{case.path}/99999999999"

        assert (await client.get(url)).status_code == 404
        assert (await client.put(url, json=case.valid)).status_code == 404
        assert (await client.delete(url)).status_code == 404
        assert tables[name].statements == 0
