"""
Pytest fixtures for KidsPOS tests.

One application per test session against in-memory SQLite. Every test
starts from empty tables and an empty APK upload directory.
"""

import io
import shutil

import pytest
from werkzeug.datastructures import FileStorage

from kidspos import create_app
from kidspos.extensions import db
from kidspos.services import get_services


@pytest.fixture(scope='session')
def apk_dir(tmp_path_factory):
    return tmp_path_factory.mktemp("apk")


@pytest.fixture(scope='session')
def app(apk_dir):
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'APK_UPLOAD_DIR': str(apk_dir),
        'APK_MAX_FILE_SIZE': 1024,
        'LOG_LEVEL': 'WARNING',
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(autouse=True)
def db_session(app, apk_dir):
    """Fresh tables and upload directory for each test."""
    db.session.rollback()
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()
    for path in apk_dir.iterdir():
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()

    yield db.session

    db.session.rollback()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return get_services()


@pytest.fixture
def store(services):
    return services.stores.create_store(name="Main Store", store_id="STORE001")


@pytest.fixture
def staff(services):
    return services.staffs.create_staff(name="Hanako", staff_id="STAFF001")


@pytest.fixture
def item(services):
    return services.items.create_item(name="Candy", price=100, stock=10, item_id="ITEM-CANDY")


def make_apk(name="app.apk", content=b"PK\x03\x04fake-apk"):
    """A FileStorage-compatible upload for ApkVersionService.upload."""
    return FileStorage(stream=io.BytesIO(content), filename=name, content_type="application/octet-stream")
