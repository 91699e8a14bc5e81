"""Development server that creates missing tables before serving.

Models ship without migration files, so the schema is synchronised from
the model definitions on startup instead of checking for migrations.
"""

from django.core.management import call_command
from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver with ``migrate --run-syncdb`` in place of migration checks."""

    help = "Start development server after creating any missing tables"

    def check_migrations(self, *_args, **_kwargs):
        """Create tables for the catalog models instead of checking migrations."""
        self.stdout.write(self.style.WARNING("Synchronising database schema"))
        call_command("migrate", run_syncdb=True, verbosity=0)
