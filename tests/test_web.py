# Overview: Pytest coverage for the server-rendered pages.

import io

from kidspos.models import ApkVersion, Item, Sale, Setting, Store


class TestPages:
    def test_index_pages_render(self, client, store, staff, item):
        for path in ("/", "/items", "/items/new", "/sales", "/sales/new", "/stores", "/stores/new",
                     "/staffs", "/staffs/new", "/settings", "/reports/sales", "/apk", "/apk/upload"):
            resp = client.get(path)
            assert resp.status_code == 200, path

    def test_unknown_item_edit_renders_error(self, client):
        resp = client.get("/items/999/edit")
        assert resp.status_code == 404
        assert b"Item not found" in resp.data


class TestItemForms:
    def test_create_redirects(self, client, db_session):
        resp = client.post("/items", data={"name": "Candy", "price": "100", "stock": "10"})
        assert resp.status_code == 303
        assert resp.headers["Location"].endswith("/items")
        assert db_session.query(Item).count() == 1

    def test_create_error_keeps_values(self, client, db_session):
        resp = client.post("/items", data={"name": "Candy", "price": "-1", "stock": "10"})
        assert resp.status_code == 400
        assert b"item price must be non-negative" in resp.data
        assert b'value="Candy"' in resp.data
        assert db_session.query(Item).count() == 0

    def test_update_and_delete(self, client, db_session, item):
        resp = client.post(f"/items/{item.id}", data={"name": "Gum", "price": "20", "stock": "3"})
        assert resp.status_code == 303
        assert db_session.get(Item, item.id).name == "Gum"

        resp = client.post(f"/items/{item.id}/delete")
        assert resp.status_code == 303
        assert db_session.get(Item, item.id).is_deleted is True


class TestSaleForm:
    def test_create_sale_skips_blank_rows(self, client, db_session, store, staff, item):
        resp = client.post("/sales", data={
            "storeId": str(store.id),
            "staffId": str(staff.id),
            "itemId[]": [str(item.id), ""],
            "quantity[]": ["2", "1"],
        })
        assert resp.status_code == 303
        sale = db_session.query(Sale).one()
        assert sale.total_price == 200
        assert db_session.get(Item, item.id).stock == 8

    def test_insufficient_stock_rerenders(self, client, db_session, store, staff, item):
        resp = client.post("/sales", data={
            "storeId": str(store.id),
            "staffId": str(staff.id),
            "itemId[]": [str(item.id)],
            "quantity[]": ["50"],
        })
        assert resp.status_code == 400
        assert b"insufficient stock for item: Candy" in resp.data
        assert db_session.query(Sale).count() == 0


class TestStoreForms:
    def test_referenced_delete_shows_error(self, client, db_session, store, staff, item):
        client.post("/sales", data={
            "storeId": str(store.id), "staffId": str(staff.id),
            "itemId[]": [str(item.id)], "quantity[]": ["1"],
        })

        resp = client.post(f"/stores/{store.id}/delete")
        assert resp.status_code == 409
        assert b"referenced by existing sales" in resp.data
        assert db_session.query(Store).count() == 1

    def test_create_requires_name(self, client):
        resp = client.post("/stores", data={"name": ""})
        assert resp.status_code == 400
        assert b"store name is required" in resp.data

    def test_staff_create_redirects(self, client):
        resp = client.post("/staffs", data={"name": "Taro"})
        assert resp.status_code == 303


class TestSettingForms:
    def test_create_update_delete(self, client, db_session):
        assert client.post("/settings", data={"key": "theme", "value": "dark", "type": "string"}).status_code == 303
        assert client.post("/settings/theme", data={"value": "light"}).status_code == 303
        assert db_session.query(Setting).filter_by(key="theme").one().value == "light"
        assert client.post("/settings/theme/delete").status_code == 303
        assert db_session.query(Setting).count() == 0

    def test_duplicate_key_rerenders(self, client):
        client.post("/settings", data={"key": "theme", "value": "dark"})
        resp = client.post("/settings", data={"key": "theme", "value": "x"})
        assert resp.status_code == 409


class TestApkForms:
    def test_upload_deactivate_delete(self, client, db_session):
        resp = client.post(
            "/apk/upload",
            data={"version": "2.0.0", "versionCode": "5", "file": (io.BytesIO(b"apk"), "kids.apk")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 303
        apk = db_session.query(ApkVersion).one()

        assert client.post(f"/apk/{apk.id}/deactivate").status_code == 303
        assert db_session.get(ApkVersion, apk.id).is_active is False

        assert client.post(f"/apk/{apk.id}/delete").status_code == 303
        assert db_session.query(ApkVersion).count() == 0

    def test_upload_error_rerenders(self, client):
        resp = client.post(
            "/apk/upload",
            data={"version": "2.0.0", "versionCode": "0", "file": (io.BytesIO(b"apk"), "kids.apk")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 400
        assert b"version code must be positive" in resp.data
