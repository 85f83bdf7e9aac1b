# tests/test_inventory.py
import pytest
from httpx import AsyncClient

from inventory_tracker.domain.enums import ProductStatus


@pytest.mark.asyncio
async def test_list_inventory_includes_type_staff_and_pc_details(
    client: AsyncClient, pc_type, vest_type, staff_member, make_products
):
    make_products(pc_type, ["PC-001"], staff_id=staff_member.id, pc_model_number="LT-1400", lot_number="L-9")
    make_products(vest_type, ["V-001"])

    resp = await client.get("/api/inventory/pc")
    assert resp.status_code == 200
    [item] = resp.json()
    assert item["product_id"] == "PC-001"
    assert item["lot_number"] == "L-9"
    assert item["status"] == "in_stock"
    assert item["type"]["name"] == "Laptop"
    assert item["staff"] == {"id": staff_member.id, "name": "Receiving Clerk"}
    assert item["pc_details"]["serial_number"] == "SN-PC-001"

    [vest] = (await client.get("/api/inventory/vest")).json()
    assert vest["staff"] is None
    assert vest["pc_details"] is None


@pytest.mark.asyncio
async def test_check_product_id_classifications(client: AsyncClient, pc_type, vest_type, make_products):
    make_products(pc_type, ["PC-001"])
    make_products(pc_type, ["PC-002"], status=ProductStatus.out_of_stock)
    make_products(vest_type, ["V-001"])

    async def _check(category: str, product_id: str) -> dict:
        resp = await client.get(f"/api/inventory/{category}/check-product-id/{product_id}")
        assert resp.status_code == 200, resp.text
        return resp.json()

    available = await _check("pc", "PC-001")
    assert available["exists"] is True
    assert available["availability"] == "available"
    assert available["existing_product"]["type_name"] == "Laptop"

    retired = await _check("pc", "PC-002")
    assert retired["exists"] is False
    assert retired["availability"] == "out_of_stock"

    elsewhere = await _check("pc", "V-001")
    assert elsewhere["availability"] == "wrong_category"
    assert elsewhere["existing_product"]["category"] == "vest"

    unknown = await _check("pc", "PC-404")
    assert unknown["availability"] == "unknown"
    assert unknown["existing_product"] is None


@pytest.mark.asyncio
async def test_retired_id_from_other_category_reports_category_first(
    client: AsyncClient, pc_type, vest_type, make_products
):
    make_products(vest_type, ["V-009"], status=ProductStatus.out_of_stock)

    resp = await client.get("/api/inventory/pc/check-product-id/V-009")

    assert resp.status_code == 200
    body = resp.json()
    assert body["availability"] == "wrong_category"
    assert body["existing_product"]["category"] == "vest"


@pytest.mark.asyncio
async def test_list_product_types_by_category(client: AsyncClient, pc_type, pc_type_desktop, vest_type):
    resp = await client.get("/api/product-types/pc")
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["Laptop", "Desktop"]
    assert {t["category"] for t in resp.json()} == {"pc"}


@pytest.mark.asyncio
async def test_latest_lot_number(client: AsyncClient, vest_type, make_products):
    empty = (await client.get("/api/latest-lot-number/vest")).json()
    assert empty["lot_number"] is None

    make_products(vest_type, ["V-001"], lot_number="LOT-1")
    make_products(vest_type, ["V-002"], lot_number="LOT-2")

    latest = (await client.get("/api/latest-lot-number/vest")).json()
    assert latest["lot_number"] == "LOT-2"
