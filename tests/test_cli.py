# Overview: Pytest coverage for the flask CLI commands.

from kidspos.models import Setting, Staff, Store
from kidspos.services.settings_service import DEFAULT_SETTINGS

from tests.conftest import make_apk


def test_system_init_is_idempotent(app, db_session):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["system", "init"])
    assert result.exit_code == 0, result.output
    assert "Created store" in result.output

    result = runner.invoke(args=["system", "init"])
    assert result.exit_code == 0, result.output
    assert "Using existing store" in result.output

    assert db_session.query(Setting).count() == len(DEFAULT_SETTINGS)
    assert db_session.query(Store).filter_by(store_id="STORE001").count() == 1
    assert db_session.query(Staff).filter_by(staff_id="STAFF001").count() == 1


def test_apk_list(app, services):
    runner = app.test_cli_runner()
    assert "No APK versions uploaded" in runner.invoke(args=["apk", "list"]).output

    services.apks.upload(make_apk(), "1.0.0", 1)
    result = runner.invoke(args=["apk", "list"])
    assert "1.0.0" in result.output
    assert "active" in result.output
