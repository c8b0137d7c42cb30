# Overview: Pytest coverage for the JSON API routes.

import io

import pytest

from kidspos.models import Item, Sale


class TestItemsApi:
    def test_crud_flow(self, client):
        resp = client.post("/api/items", json={"name": "Candy", "price": 100, "stock": 10})
        assert resp.status_code == 201
        created = resp.get_json()
        assert created["itemId"].startswith("ITEM-")

        resp = client.get(f"/api/items/{created['id']}")
        assert resp.status_code == 200
        assert resp.get_json()["name"] == "Candy"

        resp = client.put(f"/api/items/{created['id']}", json={"name": "Gum", "price": 20, "stock": 5})
        assert resp.get_json()["name"] == "Gum"

        resp = client.patch(f"/api/items/{created['id']}", json={"stock": 7})
        assert resp.status_code == 200
        assert resp.get_json()["item"]["stock"] == 7

        resp = client.get(f"/api/items/barcode/{created['itemId']}")
        assert resp.get_json()["id"] == created["id"]

        assert client.delete(f"/api/items/{created['id']}").status_code == 200
        assert client.get(f"/api/items/{created['id']}").status_code == 404
        assert client.get("/api/items").get_json() == []

    def test_validation_error(self, client):
        resp = client.post("/api/items", json={"name": "", "price": 1, "stock": 1})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "item name is required"

    def test_oversized_price_is_rejected(self, client, db_session):
        resp = client.post("/api/items", json={"name": "Candy", "price": 10**20, "stock": 1})
        assert resp.status_code == 400
        assert "price" in resp.get_json()["error"]
        assert db_session.query(Item).count() == 0

    def test_patch_wraps_item_and_put_does_not(self, client, item):
        patched = client.patch(f"/api/items/{item.id}", json={"price": 120}).get_json()
        assert set(patched) == {"item"}
        assert patched["item"]["price"] == 120

        updated = client.put(f"/api/items/{item.id}", json={"name": "Candy", "price": 130, "stock": 10}).get_json()
        assert "item" not in updated
        assert updated["price"] == 130

    def test_non_object_body(self, client):
        resp = client.post("/api/items", json=[1, 2])
        assert resp.status_code == 400

    def test_duplicate_item_id(self, client, item):
        resp = client.post("/api/items", json={"name": "X", "price": 1, "stock": 1, "itemId": item.item_id})
        assert resp.status_code == 409

    def test_unknown_barcode(self, client):
        assert client.get("/api/items/barcode/none").status_code == 404

    def test_request_id_is_echoed(self, client):
        resp = client.get("/api/items", headers={"X-Request-ID": "abc123"})
        assert resp.headers["X-Request-ID"] == "abc123"


class TestSalesApi:
    def test_create_sale(self, client, db_session, store, staff, item):
        resp = client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "details": [{"itemId": item.id, "quantity": 3, "price": 100}],
        })

        assert resp.status_code == 201
        body = resp.get_json()
        assert body["totalPrice"] == 300
        assert body["deposit"] == 300
        assert len(body["details"]) == 1
        assert body["saleAt"].endswith("Z")
        assert db_session.get(Item, item.id).stock == 7

        resp = client.get(f"/api/sales/{body['id']}")
        assert resp.get_json()["store"]["name"] == "Main Store"
        assert len(client.get("/api/sales").get_json()) == 1

    def test_insufficient_stock_details(self, client, db_session, store, staff, item):
        resp = client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "details": [{"itemId": item.id, "quantity": 99}],
        })

        assert resp.status_code == 400
        body = resp.get_json()
        assert body["error"] == "insufficient stock for item: Candy"
        assert body["details"]["stock"] == 10
        assert db_session.query(Sale).count() == 0

    @pytest.mark.parametrize("line", [
        {"quantity": 1, "price": 10**20},
        {"quantity": 10**20},
    ])
    def test_oversized_line_values_are_rejected(self, client, db_session, store, staff, item, line):
        resp = client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "details": [{"itemId": item.id, **line}],
        })
        assert resp.status_code == 400
        assert db_session.query(Sale).count() == 0
        assert db_session.get(Item, item.id).stock == 10

    def test_oversized_deposit_is_rejected(self, client, store, staff, item):
        resp = client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "deposit": 10**20,
            "details": [{"itemId": item.id, "quantity": 1}],
        })
        assert resp.status_code == 400

    def test_empty_sale(self, client, store, staff):
        resp = client.post("/api/sales", json={"storeId": store.id, "staffId": staff.id, "details": []})
        assert resp.status_code == 400

    def test_bad_sale_at(self, client, store, staff, item):
        resp = client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "saleAt": "yesterday",
            "details": [{"itemId": item.id, "quantity": 1}],
        })
        assert resp.status_code == 400

    def test_unknown_sale(self, client):
        assert client.get("/api/sales/12345").status_code == 404


class TestStoresAndStaffApi:
    def test_store_crud(self, client):
        resp = client.post("/api/stores", json={"name": "Booth"})
        assert resp.status_code == 201
        store_id = resp.get_json()["id"]

        resp = client.put(f"/api/stores/{store_id}", json={"name": "Booth 2"})
        assert resp.get_json()["name"] == "Booth 2"

        assert client.delete(f"/api/stores/{store_id}").status_code == 200
        assert client.get(f"/api/stores/{store_id}").status_code == 404

    def test_referenced_store_delete_is_conflict(self, client, store, staff, item):
        client.post("/api/sales", json={
            "storeId": store.id, "staffId": staff.id, "details": [{"itemId": item.id, "quantity": 1}],
        })
        resp = client.delete(f"/api/stores/{store.id}")
        assert resp.status_code == 409
        assert "referenced" in resp.get_json()["error"]

    def test_staff_barcode_routes(self, client, staff):
        assert client.get("/api/staffs/barcode/STAFF001").get_json()["id"] == staff.id

        resp = client.put("/api/staffs/barcode/STAFF001", json={"name": "Jiro"})
        assert resp.get_json()["name"] == "Jiro"

        assert client.delete("/api/staffs/barcode/STAFF001").status_code == 200
        assert client.get("/api/staffs/barcode/STAFF001").status_code == 404

    def test_users_routes_share_staff_records(self, client, staff):
        body = client.get("/api/users").get_json()
        assert [user["staffId"] for user in body["users"]] == ["STAFF001"]

        assert client.get("/api/users/STAFF001").get_json()["id"] == staff.id

        resp = client.post("/api/users", json={"name": "Jiro", "staffId": "STAFF002"})
        assert resp.status_code == 201
        assert client.get("/api/staffs/barcode/STAFF002").get_json()["name"] == "Jiro"

        resp = client.put("/api/users/STAFF002", json={"name": "Saburo"})
        assert resp.get_json()["name"] == "Saburo"

        assert client.delete("/api/users/STAFF002").status_code == 200
        assert client.get("/api/users/STAFF002").status_code == 404

    def test_staff_name_required(self, client):
        assert client.post("/api/staffs", json={"name": ""}).status_code == 400


class TestSettingsApi:
    def test_crud(self, client):
        resp = client.post("/api/settings", json={"key": "theme", "value": "dark", "type": "string"})
        assert resp.status_code == 201

        assert client.get("/api/settings/theme").get_json()["value"] == "dark"

        resp = client.put("/api/settings/theme", json={"value": "light"})
        assert resp.get_json()["setting"]["value"] == "light"

        assert client.delete("/api/settings/theme").status_code == 200
        assert client.get("/api/settings/theme").status_code == 404

    def test_duplicate_key(self, client):
        client.post("/api/settings", json={"key": "theme", "value": "dark"})
        assert client.post("/api/settings", json={"key": "theme", "value": "x"}).status_code == 409

    def test_status_and_application(self, client):
        status = client.get("/api/settings/status").get_json()
        assert status["status"] == "OK"
        assert status["timestamp"].endswith("Z")

        info = client.get("/api/settings/application").get_json()
        assert info["version"] == "1.0.0"
        assert info["database"] == "sqlite"
        assert info["features"]["pdf_generation"] is False


class TestReportsApi:
    def test_sales_report(self, client, store, staff, item):
        client.post("/api/sales", json={
            "storeId": store.id,
            "staffId": staff.id,
            "saleAt": "2025-05-05T10:00:00Z",
            "details": [{"itemId": item.id, "quantity": 2}],
        })

        body = client.get("/api/reports/sales?start=2025-05-05&end=2025-05-05").get_json()
        assert body["totalSales"] == 1
        assert body["totalAmount"] == 200

        body = client.get("/api/reports/sales?start=2025-05-06").get_json()
        assert body["totalSales"] == 0

    def test_bad_dates(self, client):
        assert client.get("/api/reports/sales?start=notadate").status_code == 400

    @pytest.mark.parametrize("fmt", ["pdf", "excel"])
    def test_exports_not_implemented(self, client, fmt):
        resp = client.get(f"/api/reports/sales/{fmt}")
        assert resp.status_code == 501
        assert resp.get_json()["error"] == "Not implemented"


class TestApkApi:
    def _upload(self, client, version, code, name="app.apk", content=b"PK-apk-bytes"):
        return client.post(
            "/api/apk/upload",
            data={
                "version": version,
                "versionCode": str(code),
                "releaseNotes": "notes",
                "file": (io.BytesIO(content), name),
            },
            content_type="multipart/form-data",
        )

    def test_latest_when_empty(self, client):
        resp = client.get("/api/apk/version/latest")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "No APK versions available"

    def test_upload_and_download(self, client):
        resp = self._upload(client, "1.0.0", 1)
        assert resp.status_code == 201
        apk = resp.get_json()

        resp = client.get(f"/api/apk/download/{apk['id']}")
        assert resp.status_code == 200
        assert resp.mimetype == "application/vnd.android.package-archive"
        assert "attachment" in resp.headers["Content-Disposition"]
        assert resp.data == b"PK-apk-bytes"
        resp.close()

        resp = client.get("/api/apk/download/latest")
        assert resp.status_code == 200
        resp.close()

    def test_upload_errors(self, client):
        assert self._upload(client, "1.0.0", 1, name="app.txt").status_code == 400
        assert self._upload(client, "", 1).status_code == 400
        assert self._upload(client, "1.0.0", 1).status_code == 201
        assert self._upload(client, "1.0.0", 2).status_code == 409

    def test_check(self, client):
        for code in (1, 2, 4):
            self._upload(client, f"1.{code}", code)

        body = client.get("/api/apk/version/check?currentVersionCode=1").get_json()
        assert body["hasUpdate"] is True
        assert body["latestVersion"]["versionCode"] == 2

        body = client.get("/api/apk/version/check?currentVersionCode=4").get_json()
        assert body == {"hasUpdate": False, "latestVersion": None}

    @pytest.mark.parametrize("query,error", [
        ("", "currentVersionCode is required"),
        ("?currentVersionCode=abc", "Invalid version code"),
    ])
    def test_check_bad_param(self, client, query, error):
        resp = client.get(f"/api/apk/version/check{query}")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == error

    def test_deactivate_and_delete(self, client):
        apk = self._upload(client, "1.0.0", 1).get_json()

        resp = client.put(f"/api/apk/version/{apk['id']}/deactivate")
        assert resp.get_json()["isActive"] is False
        assert client.get("/api/apk/version/all").get_json() == []

        assert client.delete(f"/api/apk/version/{apk['id']}").status_code == 200
        assert client.put(f"/api/apk/version/{apk['id']}/deactivate").status_code == 404


class TestHealthApi:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "healthy"
        assert body["checks"]["database"]["status"] == "healthy"

    def test_unknown_method_is_json(self, client):
        resp = client.post("/api/health")
        assert resp.status_code == 405
        assert "error" in resp.get_json()
