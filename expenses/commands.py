import click
from flask.cli import with_appcontext
from expenses import db
from expenses.models.expense_type import Type
from expenses.models.location import Location
from expenses.store import get_store


@click.command(name='init-db')
@with_appcontext
def init_db():
    """Create every table that does not exist yet."""
    db.create_all()
    click.echo('Database tables created.')


def _create_lookup(entity, label, description):
    store = get_store()
    result = entity.create(store, {'description': description})
    if not result.ok:
        store.rollback()
        click.echo(f'Could not create {label}: {result.error}')
        return
    store.commit()
    click.echo(f'{label.capitalize()} "{result.value.description}" created with id {result.value.id}.')


@click.command(name='add-type')
@click.argument('description')
@with_appcontext
def add_type(description):
    """Register a new expense type."""
    _create_lookup(Type, 'type', description)


@click.command(name='add-location')
@click.argument('description')
@with_appcontext
def add_location(description):
    """Register a new location."""
    _create_lookup(Location, 'location', description)


def init_app(app):
    app.cli.add_command(init_db)
    app.cli.add_command(add_type)
    app.cli.add_command(add_location)
