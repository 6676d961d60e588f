"""
Database management commands for the content core CLI.

The schema is created straight from the models; there are no migrations.
Dropping tables is destructive and asks for confirmation unless --force is
given.
"""

import logging

import click
from flask.cli import AppGroup
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

import models  # noqa: F401  registers every table on db.metadata
from extensions import db

# Initialize CLI group and logger
db_cli = AppGroup('content-db', help='Create or drop the content tables.')
logger = logging.getLogger(__name__)


@db_cli.command('init')
def init_db() -> None:
    """
    Create all content tables.

    Existing tables are left untouched, so the command is safe to re-run.

    Examples:
        $ flask content-db init
    """
    try:
        db.create_all()
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        logger.error("Database initialization failed: %s", e)
        raise click.ClickException(str(e))

    click.echo('Database initialized successfully')
    logger.info("Content tables created")


@db_cli.command('drop')
@click.option('--force/--no-force', default=False, help='Drop without confirmation')
def drop_db(force: bool) -> None:
    """
    Drop all content tables and their data.

    Examples:
        $ flask content-db drop --force
    """
    if not force and not click.confirm('This will delete all content. Continue?'):
        click.echo('Aborted')
        return

    try:
        db.drop_all()
    except SQLAlchemyError as e:
        logger.error("Dropping tables failed: %s", e)
        raise click.ClickException(str(e))

    click.echo('Database tables dropped')
    logger.warning("Content tables dropped")
