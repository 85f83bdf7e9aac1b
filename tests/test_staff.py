# tests/test_staff.py
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_and_list_staff(client: AsyncClient):
    r1 = await client.post("/api/staff", json={"name": "  Alex  "})
    assert r1.status_code == 201, r1.text
    assert r1.json()["name"] == "Alex"

    r2 = await client.post("/api/staff", json={"name": "Sam"})
    assert r2.status_code == 201

    listing = (await client.get("/api/staff")).json()
    assert [s["name"] for s in listing] == ["Alex", "Sam"]


@pytest.mark.asyncio
async def test_blank_staff_name_is_rejected(client: AsyncClient):
    resp = await client.post("/api/staff", json={"name": "   "})
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_delete_staff(client: AsyncClient, staff_member):
    staff_id = staff_member.id

    resp = await client.delete(f"/api/staff/{staff_id}")
    assert resp.status_code == 200
    assert (await client.get("/api/staff")).json() == []

    missing = await client.delete(f"/api/staff/{staff_id}")
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"
