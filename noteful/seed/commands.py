import logging

import click
from flask import Flask

from noteful.extensions import mongo
from noteful.notes.models import NoteRepository
from noteful.seed import insert_seed

logger = logging.getLogger(__name__)


def register_commands(app: Flask):
    @app.cli.command("seed-db")
    def seed_db():
        """Drop the database, recreate indexes and load the seed data."""
        mongo.drop_database()
        click.echo(f"Dropped database: {mongo.db.name}")
        mongo.ensure_indexes()
        counts = insert_seed(mongo.db)
        for name, count in counts.items():
            click.echo(f"Inserted {count} {name}")
        logger.info("database_seeded", extra=counts)

    @app.cli.command("ensure-indexes")
    def ensure_indexes():
        """Create the notes text index and the unique name indexes."""
        mongo.ensure_indexes()
        click.echo("Indexes ensured")

    @app.cli.command("search-notes")
    @click.argument("term")
    def search_notes(term):
        """Run a relevance-sorted text search and print the hits."""
        notes = NoteRepository.list(search_term=term)
        for note in notes:
            click.echo(f"{note.get('score', 0):.3f}\t{note['_id']}\t{note['title']}")
        click.echo(f"{len(notes)} result(s)")
