"""
Management command to check the blog and user collections on startup.
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from database import initializer


class Command(BaseCommand):
    help = 'Connect to MongoDB and report which default collections are empty'

    def add_arguments(self, parser):
        parser.add_argument(
            '--uri',
            help='MongoDB connection string (defaults to settings.MONGODB_URI)',
        )
        parser.add_argument(
            '--db',
            dest='db_name',
            help='Database name (defaults to settings.MONGODB_DB_NAME or the URI path)',
        )
        parser.add_argument(
            '--timeout-ms',
            dest='timeout_ms',
            type=int,
            help='Server selection timeout in milliseconds',
        )

    def handle(self, *args, **options):
        uri = options['uri'] if options.get('uri') is not None else settings.MONGODB_URI
        db_name = options['db_name'] if options.get('db_name') is not None else settings.MONGODB_DB_NAME
        timeout_ms = options['timeout_ms'] if options.get('timeout_ms') is not None else settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS

        self.stdout.write('Initializing database...')
        report = initializer.run(uri, db_name=db_name, server_selection_timeout_ms=timeout_ms)

        if report.ok:
            empty = report.check.empty_collections
            self.stdout.write(
                self.style.SUCCESS(
                    f"Database check complete (empty collections: {', '.join(empty) or 'none'})"
                )
            )
        else:
            self.stdout.write(
                self.style.ERROR(f'Database initialization failed ({report.state.value}): {report.error}')
            )
