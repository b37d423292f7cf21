import click

from app.errors import StorageError
from app.services import setup_service


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the blogs and comments tables if they do not exist."""
        try:
            setup_service.initialize_schema()
        except StorageError as e:
            raise click.ClickException(str(e)) from e
        click.echo("Database tables created successfully")
