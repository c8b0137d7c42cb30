# Overview: Flask CLI command groups for bootstrap and inspection.

# Commands (FLASK_APP=wsgi.py):
# - flask system init
#   Idempotent bootstrap: creates tables, default settings, a default store and staff member.
# - flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - flask apk list
#   List uploaded APK versions, active and inactive.

import click
from flask.cli import with_appcontext

from .extensions import db
from .models import ApkVersion
from .services import get_services

DEFAULT_STORE = ("STORE001", "Main Store")
DEFAULT_STAFF = ("STAFF001", "Admin")


@click.group('system')
def system_group():
    """System bootstrap and repair commands."""


@system_group.command('init')
@with_appcontext
def init_system():
    """Create tables, default settings, and the default store and staff member."""
    click.echo("START Initializing KidsPOS...")
    db.create_all()

    services = get_services()
    created = services.settings.ensure_defaults()
    click.echo(f"PASS Default settings created: {created}")

    code, name = DEFAULT_STORE
    store = services.stores.repo.find_by_code(code)
    if store is None:
        store = services.stores.create_store(name=name, store_id=code)
        click.echo(f"PASS Created store: {store.name} ({store.store_id})")
    else:
        click.echo(f"PASS Using existing store: {store.name} ({store.store_id})")

    code, name = DEFAULT_STAFF
    staff = services.staffs.repo.find_by_code(code)
    if staff is None:
        staff = services.staffs.create_staff(name=name, staff_id=code)
        click.echo(f"PASS Created staff: {staff.name} ({staff.staff_id})")
    else:
        click.echo(f"PASS Using existing staff: {staff.name} ({staff.staff_id})")

    click.echo("DONE KidsPOS initialized")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()
    click.echo("PASS Database reset")


@click.group('apk')
def apk_group():
    """APK version inspection."""


@apk_group.command('list')
@with_appcontext
def list_apks():
    versions = db.session.query(ApkVersion).order_by(ApkVersion.version_code.desc()).all()
    if not versions:
        click.echo("No APK versions uploaded")
        return
    for apk in versions:
        state = "active" if apk.is_active else "inactive"
        click.echo(f"{apk.id:>4}  {apk.version:<12} code={apk.version_code:<6} {state:<8} {apk.file_name}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(apk_group)
