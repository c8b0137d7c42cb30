# kidspos/__init__.py
from __future__ import annotations

from flask import Flask

from .config import Config
from .extensions import db, migrate
from .logging_setup import configure_logging


def create_app(config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    # Overrides must land before db.init_app reads the database URI
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    from .repositories import Repositories
    from .services import EXTENSION_KEY, ServiceRegistry

    app.extensions[EXTENSION_KEY] = ServiceRegistry.build(
        Repositories.build(db.session),
        apk_upload_dir=app.config["APK_UPLOAD_DIR"],
        apk_max_file_size=app.config["APK_MAX_FILE_SIZE"],
    )

    from .routes import register_routes
    register_routes(app)

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    app.logger.info("KidsPOS %s ready", app.config["APP_VERSION"])
    return app
